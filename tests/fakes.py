"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone

from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.product import Product
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository


class FakeClock:
    """Returns a fixed time that moves forward one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self._now
        self._now = self._now + timedelta(seconds=1)
        return current


class FakeOrderRepository(OrderRepository):

    def __init__(self, clock: FakeClock | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._clock = clock or FakeClock()
        self.save_calls = 0
        self.delete_calls = 0

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.values()]

    def find_by_status(self, status: OrderStatus) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.values() if o.status == status]

    def find_by_customer_email(self, email: str) -> list[Order]:
        return [
            copy.deepcopy(o) for o in self._store.values() if o.customer_email == email
        ]

    def exists_by_id(self, order_id: int) -> bool:
        return order_id in self._store

    def save(self, order: Order) -> Order:
        self.save_calls += 1
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        if order.created_at is None:
            now = self._clock()
            order.created_at = now
            order.updated_at = now
        self._store[order.id] = copy.deepcopy(order)
        return order

    def delete_by_id(self, order_id: int) -> None:
        self.delete_calls += 1
        self._store.pop(order_id, None)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete_by_id(self, product_id: str) -> None:
        self._store.pop(product_id, None)
