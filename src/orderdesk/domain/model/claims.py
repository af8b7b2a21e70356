"""Read-only view over a verified token claims bundle.

Claims arrive as arbitrary nested JSON-like data.  ``ClaimTree`` never
raises on unexpected shapes: each accessor returns a ``ClaimLookup``
saying whether the value was found, missing, or present with the wrong
type.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class LookupStatus(Enum):
    FOUND = "found"
    MISSING = "missing"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class ClaimLookup:
    status: LookupStatus
    value: Any = None
    key: str = ""

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def malformed(self) -> bool:
        return self.status is LookupStatus.MISMATCH

    def or_none(self) -> Any:
        return self.value if self.found else None


_MISSING = object()


class ClaimTree:
    """Wraps one level of a claims mapping."""

    def __init__(self, claims: Mapping[str, Any] | None) -> None:
        self._claims: Mapping[str, Any] = claims if isinstance(claims, Mapping) else {}

    def get_map(self, key: str) -> ClaimLookup:
        """Look up a nested map; the found value is itself a ``ClaimTree``."""
        value = self._claims.get(key, _MISSING)
        if value is _MISSING or value is None:
            return ClaimLookup(LookupStatus.MISSING, key=key)
        if not isinstance(value, Mapping):
            return ClaimLookup(LookupStatus.MISMATCH, key=key)
        return ClaimLookup(LookupStatus.FOUND, ClaimTree(value), key=key)

    def get_string_list(self, key: str) -> ClaimLookup:
        """Look up a list whose members are all strings."""
        value = self._claims.get(key, _MISSING)
        if value is _MISSING or value is None:
            return ClaimLookup(LookupStatus.MISSING, key=key)
        if not isinstance(value, (list, tuple)):
            return ClaimLookup(LookupStatus.MISMATCH, key=key)
        if not all(isinstance(member, str) for member in value):
            return ClaimLookup(LookupStatus.MISMATCH, key=key)
        return ClaimLookup(LookupStatus.FOUND, list(value), key=key)

    def get_string(self, key: str) -> ClaimLookup:
        value = self._claims.get(key, _MISSING)
        if value is _MISSING or value is None:
            return ClaimLookup(LookupStatus.MISSING, key=key)
        if not isinstance(value, str):
            return ClaimLookup(LookupStatus.MISMATCH, key=key)
        return ClaimLookup(LookupStatus.FOUND, value, key=key)

    def get_number(self, key: str) -> ClaimLookup:
        value = self._claims.get(key, _MISSING)
        if value is _MISSING or value is None:
            return ClaimLookup(LookupStatus.MISSING, key=key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return ClaimLookup(LookupStatus.MISMATCH, key=key)
        return ClaimLookup(LookupStatus.FOUND, value, key=key)
