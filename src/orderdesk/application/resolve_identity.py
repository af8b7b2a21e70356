"""Application service: describe the caller from a verified claims bundle.

Missing identity claims come back as ``None``; whether that matters is
up to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from orderdesk.application.dto import IdentityDTO
from orderdesk.domain.model.claims import ClaimTree
from orderdesk.domain.model.roles import Role
from orderdesk.domain.service.claims_authorizer import ClaimsAuthorizer


class ResolveIdentityHandler:

    def __init__(self, authorizer: ClaimsAuthorizer) -> None:
        self._authorizer = authorizer

    def handle(
        self,
        claims: Mapping[str, Any] | None,
        default_authorities: Iterable[object] = (),
    ) -> IdentityDTO:
        auth = self._authorizer
        tree = ClaimTree(claims)
        roles = auth.resolve_roles(claims, default_authorities)

        return IdentityDTO(
            username=auth.username(claims),
            email=auth.email(claims),
            first_name=auth.first_name(claims),
            last_name=auth.last_name(claims),
            roles=sorted(roles.names),
            groups=auth.groups(claims),
            subject=tree.get_string("sub").or_none(),
            issuer=tree.get_string("iss").or_none(),
            expires_at=_epoch(tree.get_number("exp").or_none()),
            issued_at=_epoch(tree.get_number("iat").or_none()),
            flags={role.value: roles.has(role) for role in Role},
        )


def _epoch(seconds: float | None) -> datetime | None:
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
