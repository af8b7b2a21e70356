"""Time source shared by handlers and repositories.

Injected wherever timestamps are stamped so tests can pin the time.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
