"""Application service: Update Order Status use case.

Any status may be set from any other; only ``updated_at`` moves with it.
"""

from __future__ import annotations

import structlog

from orderdesk.application.dto import OrderDTO, to_order_dto
from orderdesk.domain.clock import Clock, utc_now
from orderdesk.domain.exceptions import OrderNotFound
from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock = utc_now) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, order_id: int, new_status: OrderStatus | str) -> OrderDTO:
        status = OrderStatus.parse(new_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)

        previous = order.status
        order.change_status(status, at=self._clock())
        saved = self._order_repo.save(order)

        logger.info(
            "Order status changed",
            order_id=order_id,
            from_status=previous.value,
            to_status=status.value,
        )
        return to_order_dto(saved)
