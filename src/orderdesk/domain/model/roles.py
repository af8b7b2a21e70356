"""Role vocabulary and the per-request resolved role set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

ROLE_PREFIX = "ROLE_"


class Role(Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"
    CUSTOMER = "CUSTOMER"


def normalize_role(role: str | Role) -> str:
    """Canonical authority string: ``"admin"`` and ``"ROLE_Admin"`` -> ``"ROLE_ADMIN"``."""
    name = role.value if isinstance(role, Role) else role.strip().upper()
    if name.startswith(ROLE_PREFIX):
        name = name[len(ROLE_PREFIX):]
    return ROLE_PREFIX + name


@dataclass(frozen=True)
class RoleSet:
    """Deduplicated, normalized authorities derived from one claims bundle."""

    authorities: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, roles: Iterable[str | Role]) -> RoleSet:
        return cls(frozenset(normalize_role(r) for r in roles if _usable(r)))

    @property
    def names(self) -> frozenset[str]:
        """Role names without the authority prefix, e.g. ``{"ADMIN"}``."""
        return frozenset(a[len(ROLE_PREFIX):] for a in self.authorities)

    def has(self, role: object) -> bool:
        if not isinstance(role, (str, Role)):
            return False
        return _usable(role) and normalize_role(role) in self.authorities

    def has_any(self, *roles: object) -> bool:
        return any(self.has(role) for role in roles)

    def __contains__(self, role: object) -> bool:
        return self.has(role)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.authorities)

    def __bool__(self) -> bool:
        return bool(self.authorities)


def _usable(role: str | Role) -> bool:
    if isinstance(role, Role):
        return True
    name = role.strip().upper()
    return bool(name) and name != ROLE_PREFIX
