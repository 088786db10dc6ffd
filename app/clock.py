"""Time source for record timestamps and freshness checks."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock returning naive UTC datetimes (the store's TIMESTAMP type)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).replace(tzinfo=None)
