"""Load an already-verified claims bundle from a JSON file.

Two layouts are accepted.  A bare claims object::

    {"preferred_username": "alice", "realm_access": {"roles": ["admin"]}}

or an envelope that also carries pre-granted authorities::

    {"claims": {...}, "default_authorities": ["ROLE_CUSTOMER"]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from orderdesk.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ClaimsBundle:
    claims: dict[str, Any] = field(default_factory=dict)
    default_authorities: list[str] = field(default_factory=list)


def load_claims(path: Path) -> ClaimsBundle:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValidationError(f"Cannot read claims file {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Claims file {path} is not valid JSON") from exc

    if not isinstance(raw, dict):
        raise ValidationError(f"Claims file {path} must contain a JSON object")

    if "claims" in raw and isinstance(raw["claims"], dict):
        authorities = raw.get("default_authorities") or []
        if not isinstance(authorities, list):
            authorities = []
        return ClaimsBundle(
            claims=raw["claims"],
            default_authorities=[a for a in authorities if isinstance(a, str)],
        )
    return ClaimsBundle(claims=raw)
