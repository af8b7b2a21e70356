"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):
    """Durable store for orders.

    ``save`` assigns the id, ``created_at`` and ``updated_at`` of a new
    order.  An order and its items are written and deleted together.
    """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in store order."""

    @abstractmethod
    def find_by_status(self, status: OrderStatus) -> list[Order]:
        """Return orders currently in ``status``."""

    @abstractmethod
    def find_by_customer_email(self, email: str) -> list[Order]:
        """Return orders placed with ``email``."""

    @abstractmethod
    def exists_by_id(self, order_id: int) -> bool:
        """True if an order with this ID is stored."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order and return it."""

    @abstractmethod
    def delete_by_id(self, order_id: int) -> None:
        """Remove an order together with its items."""
