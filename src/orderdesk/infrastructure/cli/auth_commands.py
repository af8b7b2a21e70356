"""CLI commands for inspecting the caller's identity."""

from __future__ import annotations

import click

from orderdesk.application.resolve_identity import ResolveIdentityHandler
from orderdesk.infrastructure.bootstrap import claims_authorizer
from orderdesk.infrastructure.cli.context import CliContext, pass_cli_context


def _show(value) -> str:
    return "-" if value is None else str(value)


@click.command("whoami")
@pass_cli_context
def auth_whoami(ctx: CliContext) -> None:
    """Show identity fields and resolved roles from the claims file."""
    handler = ResolveIdentityHandler(claims_authorizer())
    identity = handler.handle(ctx.bundle.claims, ctx.bundle.default_authorities)

    click.echo(f"Username:   {_show(identity.username)}")
    click.echo(f"Email:      {_show(identity.email)}")
    click.echo(f"Name:       {_show(identity.first_name)} {_show(identity.last_name)}")
    click.echo(f"Roles:      {', '.join(identity.roles) or '-'}")
    click.echo(f"Groups:     {', '.join(identity.groups) if identity.groups else '-'}")
    click.echo(f"Subject:    {_show(identity.subject)}")
    click.echo(f"Issuer:     {_show(identity.issuer)}")
    if identity.expires_at is not None:
        click.echo(f"Expires:    {identity.expires_at:%Y-%m-%d %H:%M UTC}")
