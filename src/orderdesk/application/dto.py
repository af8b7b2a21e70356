"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Monetary fields stay
``Decimal`` so callers never see a float.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import Product


# --- Input -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineRequest:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderRequest:
    """Input: a complete order-creation request.

    ``status`` mirrors what a client may send; it is ignored because new
    orders always start as PENDING.
    """

    customer_name: str
    customer_email: str
    customer_phone: str
    shipping_address: str
    lines: list[OrderLineRequest]
    status: str | None = None


# --- Output ------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    id: int
    customer_name: str
    customer_email: str
    customer_phone: str
    shipping_address: str
    status: str
    items: list[OrderItemDTO]
    total_amount: Decimal
    currency: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: Decimal
    currency: str
    stock_quantity: int
    category: str
    description: str


@dataclass(frozen=True)
class IdentityDTO:
    """Who the caller is, as read from their claims."""

    username: str | None
    email: str | None
    first_name: str | None
    last_name: str | None
    roles: list[str]
    groups: list[str] | None
    subject: str | None = None
    issuer: str | None = None
    expires_at: datetime | None = None
    issued_at: datetime | None = None
    flags: dict[str, bool] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.flags.get("ADMIN", False)

    @property
    def is_manager(self) -> bool:
        return self.flags.get("MANAGER", False)

    @property
    def is_employee(self) -> bool:
        return self.flags.get("EMPLOYEE", False)

    @property
    def is_customer(self) -> bool:
        return self.flags.get("CUSTOMER", False)


# --- Mapping -----------------------------------------------------------------


def to_order_dto(order: Order) -> OrderDTO:
    total = order.total_amount
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        customer_phone=order.customer_phone,
        shipping_address=order.shipping_address,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=item.unit_price.amount,
                line_total=item.line_total.amount,
            )
            for item in order.items
        ],
        total_amount=total.amount,
        currency=total.currency,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price.amount,
        currency=product.price.currency,
        stock_quantity=product.stock_quantity,
        category=product.category,
        description=product.description,
    )
