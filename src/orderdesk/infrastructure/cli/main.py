from pathlib import Path

import click

from orderdesk.config import settings
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import claims_authorizer
from orderdesk.infrastructure.cli.auth_commands import auth_whoami
from orderdesk.infrastructure.cli.context import CliContext
from orderdesk.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_status,
)
from orderdesk.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from orderdesk.infrastructure.identity.claims_file import ClaimsBundle, load_claims
from orderdesk.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--claims",
    "claims_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=lambda: settings.CLAIMS_FILE or None,
    help="JSON file holding the caller's verified token claims.",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=lambda: settings.DATA_DIR,
    help="Directory holding products.json and orders.json.",
)
@click.option("--log-level", default=lambda: settings.LOG_LEVEL, help="Log level.")
@click.pass_context
def cli(ctx: click.Context, claims_path: Path | None, data_dir: Path, log_level: str) -> None:
    """orderdesk — catalog and order management"""
    configure_logging(log_level)

    bundle = ClaimsBundle()
    if claims_path is not None:
        try:
            bundle = load_claims(Path(claims_path))
        except DomainException as exc:
            raise click.ClickException(str(exc))

    roles = claims_authorizer().resolve_roles(bundle.claims, bundle.default_authorities)
    ctx.obj = CliContext(data_dir=Path(data_dir), bundle=bundle, roles=roles)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def auth() -> None:
    """Inspect the current identity."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
auth.add_command(auth_whoami)
