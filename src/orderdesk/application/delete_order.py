"""Application service: Delete Order use case."""

from __future__ import annotations

import structlog

from orderdesk.domain.exceptions import OrderNotFound
from orderdesk.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        if not self._order_repo.exists_by_id(order_id):
            raise OrderNotFound(order_id)

        # Items are embedded in the order record and go with it.
        self._order_repo.delete_by_id(order_id)
        logger.info("Order deleted", order_id=order_id)
