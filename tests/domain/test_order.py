"""Unit tests for the Order aggregate and its business rules."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from orderdesk.domain.exceptions import EmptyOrderRequest, ValidationError
from orderdesk.domain.model.order import CustomerInfo, Order, OrderItem, OrderStatus
from orderdesk.domain.model.value_objects import Money, Quantity

ALICE = CustomerInfo(name="Alice", email="alice@example.com", phone="555-0100")


def _make_item(name: str = "Widget", qty: int = 1, price: str = "15.00") -> OrderItem:
    """Helper to build a valid item."""
    return OrderItem(
        product_id="1",
        product_name=name,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(ALICE, "1 Main St", [_make_item(qty=2, price="10.00")])
        assert order.customer_name == "Alice"
        assert order.customer_email == "alice@example.com"
        assert order.shipping_address == "1 Main St"
        assert order.status == OrderStatus.PENDING
        assert len(order.items) == 1
        assert order.total_amount == Money.of("20.00")

    def test_id_and_timestamps_unset_for_new_orders(self):
        order = Order.create(ALICE, "1 Main St", [_make_item()])
        assert order.id is None  # assigned by repository
        assert order.created_at is None
        assert order.updated_at is None

    def test_total_is_sum_of_items(self):
        items = [
            _make_item("Widget", qty=3, price="15.00"),
            _make_item("Gadget", qty=5, price="25.00"),
        ]
        order = Order.create(ALICE, "1 Main St", items)
        assert order.total_amount == Money.of("170.00")

    def test_total_equals_sum_of_line_totals(self):
        items = [
            _make_item("A", qty=10_000, price="0.01"),
            _make_item("B", qty=3, price="333.33"),
            _make_item("C", qty=7, price="19.99"),
        ]
        order = Order.create(ALICE, "1 Main St", items)
        expected = sum((i.line_total.amount for i in items), Decimal("0"))
        assert order.total_amount.amount == expected == Decimal("1239.92")

    def test_customer_fields_are_trimmed(self):
        customer = CustomerInfo(name="  Bob ", email=" bob@example.com ", phone=" 1 ")
        order = Order.create(customer, "  2 Side St ", [_make_item()])
        assert order.customer_name == "Bob"
        assert order.customer_email == "bob@example.com"
        assert order.shipping_address == "2 Side St"


class TestOrderValidation:

    def test_no_items_rejected(self):
        with pytest.raises(EmptyOrderRequest, match="at least one item"):
            Order.create(ALICE, "1 Main St", [])

    def test_empty_customer_name_rejected(self):
        customer = CustomerInfo(name="", email="a@example.com", phone="1")
        with pytest.raises(ValidationError, match="Customer name"):
            Order.create(customer, "1 Main St", [_make_item()])

    def test_whitespace_email_rejected(self):
        customer = CustomerInfo(name="Alice", email="   ", phone="1")
        with pytest.raises(ValidationError, match="Customer email"):
            Order.create(customer, "1 Main St", [_make_item()])

    def test_missing_address_rejected(self):
        with pytest.raises(ValidationError, match="Shipping address"):
            Order.create(ALICE, "", [_make_item()])

    def test_mixed_currencies_rejected(self):
        euro_item = OrderItem(
            product_id="2",
            product_name="Euro thing",
            quantity=Quantity(1),
            unit_price=Money(Decimal("3.00"), "EUR"),
        )
        with pytest.raises(ValidationError, match="one currency"):
            Order.create(ALICE, "1 Main St", [_make_item(), euro_item])


class TestOrderStatus:

    def test_change_status_stamps_updated_at_only(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        later = datetime(2024, 1, 2, tzinfo=timezone.utc)
        order = Order.create(ALICE, "1 Main St", [_make_item()])
        order.created_at = created
        order.updated_at = created

        order.change_status(OrderStatus.SHIPPED, at=later)

        assert order.status == OrderStatus.SHIPPED
        assert order.updated_at == later
        assert order.created_at == created

    def test_any_status_may_follow_any_other(self):
        order = Order.create(ALICE, "1 Main St", [_make_item()])
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        order.change_status(OrderStatus.DELIVERED, at=now)
        order.change_status(OrderStatus.PENDING, at=now)
        assert order.status == OrderStatus.PENDING

    def test_terminal_states(self):
        assert OrderStatus.DELIVERED.is_terminal
        assert OrderStatus.CANCELLED.is_terminal
        assert not OrderStatus.PENDING.is_terminal
        assert not OrderStatus.SHIPPED.is_terminal

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse("shipped") is OrderStatus.SHIPPED
        assert OrderStatus.parse(" Confirmed ") is OrderStatus.CONFIRMED
        assert OrderStatus.parse(OrderStatus.CANCELLED) is OrderStatus.CANCELLED

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("LOST")


class TestOrderItem:

    def test_line_total_calculation(self):
        item = _make_item(qty=3, price="15.00")
        assert item.line_total == Money.of("45.00")

    def test_line_total_is_exact(self):
        item = _make_item(qty=10_000, price="19.99")
        assert item.line_total.amount == Decimal("199900.00")

    def test_price_is_snapshot(self):
        """The item holds its own price copy, unaffected by external changes."""
        original_price = Money.of("15.00")
        item = OrderItem(
            product_id="1",
            product_name="Widget",
            quantity=Quantity(1),
            unit_price=original_price,
        )
        assert item.unit_price == Money.of("15.00")
