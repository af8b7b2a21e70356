"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  Items never
outlive their order: persisting or deleting an Order persists or
deletes its items in the same step.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from orderdesk.domain.exceptions import EmptyOrderRequest, ValidationError
from orderdesk.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @classmethod
    def parse(cls, raw: str | OrderStatus) -> OrderStatus:
        """Accept an enum member or its case-insensitive name."""
        if isinstance(raw, OrderStatus):
            return raw
        try:
            return cls(str(raw).strip().upper())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Unknown order status {raw!r} (expected one of {allowed})"
            ) from exc


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    email: str
    phone: str


@dataclass(frozen=True)
class OrderItem:
    """One line of an order with the unit price captured at creation.

    ``unit_price`` is a snapshot: later catalog price changes never reach
    an existing item.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.

    ``id``, ``created_at`` and ``updated_at`` stay ``None`` until the
    repository saves the order for the first time.
    """

    id: int | None
    customer_name: str
    customer_email: str
    customer_phone: str
    shipping_address: str
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer: CustomerInfo,
        shipping_address: str,
        items: list[OrderItem],
    ) -> Order:
        """Create a new PENDING order, enforcing all invariants."""
        if not items:
            raise EmptyOrderRequest()

        _require(customer.name, "Customer name")
        _require(customer.email, "Customer email")
        _require(customer.phone, "Customer phone")
        _require(shipping_address, "Shipping address")

        currencies = {item.unit_price.currency for item in items}
        if len(currencies) > 1:
            raise ValidationError(
                f"Order items must share one currency, got {sorted(currencies)}"
            )

        return Order(
            id=None,
            customer_name=customer.name.strip(),
            customer_email=customer.email.strip(),
            customer_phone=customer.phone.strip(),
            shipping_address=shipping_address.strip(),
            items=list(items),
            status=OrderStatus.PENDING,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus, at: datetime) -> None:
        """Move to ``new_status`` and stamp ``updated_at``.

        Any status may follow any other; there is no transition table.
        """
        self.status = new_status
        self.updated_at = at

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result


def _require(value: str, label: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
