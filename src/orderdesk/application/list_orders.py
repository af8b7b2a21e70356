"""Application service: order queries.

Pure reads.  Results come back in store order and an empty match is an
empty list, not an error.
"""

from __future__ import annotations

from orderdesk.application.dto import OrderDTO, to_order_dto
from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def all(self) -> list[OrderDTO]:
        return [to_order_dto(o) for o in self._order_repo.list_all()]

    def by_status(self, status: OrderStatus | str) -> list[OrderDTO]:
        parsed = OrderStatus.parse(status)
        return [to_order_dto(o) for o in self._order_repo.find_by_status(parsed)]

    def by_customer_email(self, email: str) -> list[OrderDTO]:
        return [to_order_dto(o) for o in self._order_repo.find_by_customer_email(email)]
