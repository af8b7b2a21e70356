"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from orderdesk.application.add_product import AddProductHandler
from orderdesk.application.delete_product import DeleteProductHandler
from orderdesk.application.list_products import ListProductsHandler
from orderdesk.application.update_product import UpdateProductHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.service.access_policy import Action, Resource
from orderdesk.infrastructure.bootstrap import product_repository
from orderdesk.infrastructure.cli.context import CliContext, pass_cli_context, require


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@click.option("--category", default="", help="Catalog category.")
@click.option("--description", default="", help="Free-text description.")
@pass_cli_context
def product_add(
    ctx: CliContext, name: str, price: str, stock: int, category: str, description: str
) -> None:
    """Add a new product to the catalog."""
    require(ctx, Resource.PRODUCTS, Action.CREATE)
    handler = AddProductHandler(product_repo=product_repository(ctx.data_dir))

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock,
            category=category,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at ${product.price:.2f}")


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@pass_cli_context
def product_list(ctx: CliContext, category: str | None) -> None:
    """List products in the catalog."""
    require(ctx, Resource.PRODUCTS, Action.READ)
    products = ListProductsHandler(product_repository(ctx.data_dir)).handle(category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<16} {'Stock':>6} {'Price':>10}")
    click.echo("-" * 62)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category:<16} {p.stock_quantity:>6} ${p.price:>9.2f}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_cli_context
def product_show(ctx: CliContext, product_id: str) -> None:
    """Show one product."""
    require(ctx, Resource.PRODUCTS, Action.READ)
    handler = ListProductsHandler(product_repository(ctx.data_dir))

    try:
        p = handler.get(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"  Price:    ${p.price:.2f} {p.currency}")
    click.echo(f"  Stock:    {p.stock_quantity}")
    if p.category:
        click.echo(f"  Category: {p.category}")
    if p.description:
        click.echo(f"  {p.description}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@pass_cli_context
def product_update(
    ctx: CliContext,
    product_id: str,
    name: str | None,
    price: str | None,
    stock: int | None,
    category: str | None,
    description: str | None,
) -> None:
    """Update a product (existing orders keep their prices)."""
    require(ctx, Resource.PRODUCTS, Action.UPDATE)
    handler = UpdateProductHandler(product_repo=product_repository(ctx.data_dir))

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            stock_quantity=stock,
            category=category,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated (${product.price:.2f})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_cli_context
def product_delete(ctx: CliContext, product_id: str) -> None:
    """Remove a product from the catalog."""
    require(ctx, Resource.PRODUCTS, Action.DELETE)
    handler = DeleteProductHandler(product_repo=product_repository(ctx.data_dir))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
