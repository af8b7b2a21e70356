"""Domain service: which roles may perform which action on which resource."""

from __future__ import annotations

from enum import Enum

from orderdesk.domain.exceptions import AccessDenied
from orderdesk.domain.model.roles import Role, RoleSet


class Resource(Enum):
    PRODUCTS = "products"
    ORDERS = "orders"


class Action(Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_EVERYONE = frozenset(Role)
_STAFF = frozenset({Role.ADMIN, Role.MANAGER, Role.EMPLOYEE})
_MANAGEMENT = frozenset({Role.ADMIN, Role.MANAGER})
_ADMIN_ONLY = frozenset({Role.ADMIN})

DEFAULT_RULES: dict[tuple[Resource, Action], frozenset[Role]] = {
    (Resource.PRODUCTS, Action.READ): _EVERYONE,
    (Resource.PRODUCTS, Action.CREATE): _MANAGEMENT,
    (Resource.PRODUCTS, Action.UPDATE): _MANAGEMENT,
    (Resource.PRODUCTS, Action.DELETE): _ADMIN_ONLY,
    (Resource.ORDERS, Action.READ): _STAFF,
    (Resource.ORDERS, Action.CREATE): _EVERYONE,
    (Resource.ORDERS, Action.UPDATE): _STAFF,
    (Resource.ORDERS, Action.DELETE): _ADMIN_ONLY,
}


class AccessPolicy:

    def __init__(
        self,
        rules: dict[tuple[Resource, Action], frozenset[Role]] | None = None,
    ) -> None:
        self._rules = dict(DEFAULT_RULES if rules is None else rules)

    def allowed_roles(self, resource: Resource, action: Action) -> frozenset[Role]:
        """Roles granted the action; unknown pairs grant nothing."""
        return self._rules.get((resource, action), frozenset())

    def is_allowed(self, roles: RoleSet, resource: Resource, action: Action) -> bool:
        return roles.has_any(*self.allowed_roles(resource, action))

    def check(self, roles: RoleSet, resource: Resource, action: Action) -> None:
        if not self.is_allowed(roles, resource, action):
            raise AccessDenied(
                f"Not allowed to {action.value} {resource.value}"
            )
