"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderdesk.application.create_order import CreateOrderHandler
from orderdesk.application.delete_order import DeleteOrderHandler
from orderdesk.application.dto import OrderDTO, OrderLineRequest, OrderRequest
from orderdesk.application.list_orders import ListOrdersHandler
from orderdesk.application.show_order import ShowOrderHandler
from orderdesk.application.update_order_status import UpdateOrderStatusHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.service.access_policy import Action, Resource
from orderdesk.infrastructure.bootstrap import order_repository, product_repository
from orderdesk.infrastructure.cli.context import CliContext, pass_cli_context, require

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderLineRequest]:
    """Parse '1:3,2:5' (product id : quantity) into OrderLineRequest list."""
    lines: list[OrderLineRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        lines.append(OrderLineRequest(product_id=product_id.strip(), quantity=qty))
    return lines


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}> {dto.customer_phone}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    if dto.created_at is not None:
        click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M UTC}")
    if dto.updated_at is not None:
        click.echo(f"Updated:  {dto.updated_at:%Y-%m-%d %H:%M UTC}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*50}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{_money(item.unit_price):>10} {_money(item.line_total):>12}"
        )
    click.echo(f"  {'-'*50}")
    click.echo(f"  {'Order Total':<27} {_money(dto.total_amount):>23}")


def _money(amount) -> str:
    return f"${amount:.2f}"


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", required=True, help="Customer phone.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@pass_cli_context
def order_create(
    ctx: CliContext, customer: str, email: str, phone: str, address: str, items: str
) -> None:
    """Place a new order (always starts PENDING)."""
    require(ctx, Resource.ORDERS, Action.CREATE)
    lines = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(ctx.data_dir),
        product_repo=product_repository(ctx.data_dir),
    )

    try:
        dto = handler.handle(
            OrderRequest(
                customer_name=customer,
                customer_email=email,
                customer_phone=phone,
                shipping_address=address,
                lines=lines,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@pass_cli_context
def order_show(ctx: CliContext, order_id: int) -> None:
    """Show details of an existing order."""
    require(ctx, Resource.ORDERS, Action.READ)
    handler = ShowOrderHandler(order_repo=order_repository(ctx.data_dir))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--status", type=_STATUS_CHOICE, default=None, help="Only orders in this status.")
@click.option("--email", default=None, help="Only orders placed with this email.")
@pass_cli_context
def order_list(ctx: CliContext, status: str | None, email: str | None) -> None:
    """List orders, optionally filtered by status or customer email."""
    require(ctx, Resource.ORDERS, Action.READ)
    if status and email:
        raise click.UsageError("Use either --status or --email, not both.")

    handler = ListOrdersHandler(order_repo=order_repository(ctx.data_dir))
    try:
        if status:
            orders = handler.by_status(status)
        elif email:
            orders = handler.by_customer_email(email)
        else:
            orders = handler.all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Customer':<24} {'Total':>12}")
    click.echo("-" * 55)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {dto.customer_email:<24} {_money(dto.total_amount):>12}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", required=True, type=_STATUS_CHOICE, help="New status.")
@pass_cli_context
def order_status(ctx: CliContext, order_id: int, status: str) -> None:
    """Set the status of an order."""
    require(ctx, Resource.ORDERS, Action.UPDATE)
    handler = UpdateOrderStatusHandler(order_repo=order_repository(ctx.data_dir))

    try:
        dto = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@pass_cli_context
def order_delete(ctx: CliContext, order_id: int) -> None:
    """Delete an order and its items."""
    require(ctx, Resource.ORDERS, Action.DELETE)
    handler = DeleteOrderHandler(order_repo=order_repository(ctx.data_dir))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
