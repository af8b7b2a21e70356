"""JSON-file-backed implementation of OrderRepository.

Each order is one record with its items embedded.  Every write goes to a
sibling temp file that then replaces the store in one ``os.replace``, so
an order is stored or removed together with all of its items, and a
failed write leaves the previous file intact.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from orderdesk.domain.clock import Clock, utc_now
from orderdesk.domain.exceptions import DataIntegrityError
from orderdesk.domain.model.order import Order, OrderItem, OrderStatus
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, clock: Clock = utc_now) -> None:
        self._file_path = file_path
        self._clock = clock
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_by_status(self, status: OrderStatus) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["status"] == status.value
        ]

    def find_by_customer_email(self, email: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["customer_email"] == email
        ]

    def exists_by_id(self, order_id: int) -> bool:
        return any(raw["id"] == order_id for raw in self._load_raw())

    def save(self, order: Order) -> Order:
        orders = self._load_raw()

        if order.id is None:
            order.id = max((o["id"] for o in orders), default=0) + 1
        if order.created_at is None:
            now = self._clock()
            order.created_at = now
            order.updated_at = now

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        return order

    def delete_by_id(self, order_id: int) -> None:
        orders = [raw for raw in self._load_raw() if raw["id"] != order_id]
        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "customer_phone": order.customer_phone,
            "shipping_address": order.shipping_address,
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "created_at": _iso(order.created_at),
            "updated_at": _iso(order.updated_at),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        order = Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            customer_email=raw["customer_email"],
            customer_phone=raw["customer_phone"],
            shipping_address=raw["shipping_address"],
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=_parse_dt(raw.get("created_at")),
            updated_at=_parse_dt(raw.get("updated_at")),
        )

        stored_total = raw.get("total_amount")
        if stored_total is not None and Decimal(stored_total) != order.total_amount.amount:
            raise DataIntegrityError(
                f"Order #{order.id} total {stored_total} does not match "
                f"its items ({order.total_amount.amount})"
            )
        return order

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(orders, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
