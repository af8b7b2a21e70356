"""Per-invocation state shared by all CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import click

from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.model.roles import RoleSet
from orderdesk.domain.service.access_policy import Action, Resource
from orderdesk.infrastructure.bootstrap import access_policy
from orderdesk.infrastructure.identity.claims_file import ClaimsBundle


@dataclass
class CliContext:
    data_dir: Path
    bundle: ClaimsBundle = field(default_factory=ClaimsBundle)
    roles: RoleSet = field(default_factory=RoleSet)


pass_cli_context = click.make_pass_decorator(CliContext)


def require(ctx: CliContext, resource: Resource, action: Action) -> None:
    """Abort the command unless the caller's roles allow the action."""
    try:
        access_policy().check(ctx.roles, resource, action)
    except DomainException as exc:
        raise click.ClickException(str(exc))
