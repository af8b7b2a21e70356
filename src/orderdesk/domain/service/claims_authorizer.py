"""Domain service: resolve role authorities from token claims.

Roles can live in three places and all of them are merged:

1. ``realm_access.roles`` — realm-wide roles.
2. ``resource_access.<client_id>.roles`` — roles scoped to this backend.
3. Authorities already granted to the identity before claim extraction,
   passed in explicitly as ``default_authorities``.  Only the
   ``ROLE_``-prefixed ones count; scopes and other grants are ignored.

A missing or oddly shaped source contributes nothing.  Resolution never
raises on malformed claims.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from orderdesk.domain.model.claims import ClaimLookup, ClaimTree
from orderdesk.domain.model.roles import ROLE_PREFIX, Role, RoleSet

logger = structlog.get_logger(__name__)

DEFAULT_CLIENT_ID = "ecommerce-backend"

REALM_ACCESS_CLAIM = "realm_access"
RESOURCE_ACCESS_CLAIM = "resource_access"
ROLES_KEY = "roles"


class ClaimsAuthorizer:
    """Stateless: one instance can serve every request."""

    def __init__(self, client_id: str = DEFAULT_CLIENT_ID) -> None:
        self._client_id = client_id

    # --- Roles ----------------------------------------------------------------

    def resolve_roles(
        self,
        claims: Mapping[str, Any] | None,
        default_authorities: Iterable[object] = (),
    ) -> RoleSet:
        tree = ClaimTree(claims)
        found: list[str] = []
        found.extend(self._realm_roles(tree))
        found.extend(self._resource_roles(tree))
        found.extend(self._default_roles(default_authorities))
        return RoleSet.of(found)

    def has_role(
        self,
        claims: Mapping[str, Any] | None,
        role: str | Role,
        default_authorities: Iterable[object] = (),
    ) -> bool:
        return self.resolve_roles(claims, default_authorities).has(role)

    def has_any_role(
        self,
        claims: Mapping[str, Any] | None,
        *roles: str | Role,
        default_authorities: Iterable[object] = (),
    ) -> bool:
        return self.resolve_roles(claims, default_authorities).has_any(*roles)

    def _realm_roles(self, tree: ClaimTree) -> list[str]:
        realm = tree.get_map(REALM_ACCESS_CLAIM)
        if not realm.found:
            _note_malformed(realm)
            return []
        return _roles_in(realm.value, REALM_ACCESS_CLAIM)

    def _resource_roles(self, tree: ClaimTree) -> list[str]:
        resources = tree.get_map(RESOURCE_ACCESS_CLAIM)
        if not resources.found:
            _note_malformed(resources)
            return []
        client = resources.value.get_map(self._client_id)
        if not client.found:
            _note_malformed(client)
            return []
        return _roles_in(client.value, f"{RESOURCE_ACCESS_CLAIM}.{self._client_id}")

    @staticmethod
    def _default_roles(default_authorities: Iterable[object] | str) -> list[str]:
        """Keep only default authorities that are roles.

        Other granted authorities, such as ``SCOPE_profile``, are not roles
        and are dropped.
        """
        if isinstance(default_authorities, str):
            default_authorities = [default_authorities]
        roles = []
        for authority in default_authorities or ():
            if isinstance(authority, Role):
                roles.append(authority.value)
            elif isinstance(authority, str) and _is_role_authority(authority):
                roles.append(authority)
            else:
                logger.debug(
                    "Ignoring non-role default authority",
                    authority_type=type(authority).__name__,
                )
        return roles

    # --- Identity fields ------------------------------------------------------

    @staticmethod
    def username(claims: Mapping[str, Any] | None) -> str | None:
        return ClaimTree(claims).get_string("preferred_username").or_none()

    @staticmethod
    def email(claims: Mapping[str, Any] | None) -> str | None:
        return ClaimTree(claims).get_string("email").or_none()

    @staticmethod
    def first_name(claims: Mapping[str, Any] | None) -> str | None:
        return ClaimTree(claims).get_string("given_name").or_none()

    @staticmethod
    def last_name(claims: Mapping[str, Any] | None) -> str | None:
        return ClaimTree(claims).get_string("family_name").or_none()

    @staticmethod
    def groups(claims: Mapping[str, Any] | None) -> list[str] | None:
        return ClaimTree(claims).get_string_list("groups").or_none()


def _roles_in(tree: ClaimTree, location: str) -> list[str]:
    roles = tree.get_string_list(ROLES_KEY)
    if not roles.found:
        _note_malformed(roles, location)
        return []
    return roles.value


def _note_malformed(lookup: ClaimLookup, location: str = "") -> None:
    if lookup.malformed:
        path = f"{location}.{lookup.key}" if location else lookup.key
        logger.debug("Malformed claim ignored", claim=path)


def _is_role_authority(authority: str) -> bool:
    return authority.strip().upper().startswith(ROLE_PREFIX)
