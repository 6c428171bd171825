from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Source of the current instant. Implementations must return timezone-aware datetimes.
    """
    def now(self) -> datetime:
        ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock frozen at a given instant. Used in tests and for replaying an evaluation.
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise ValueError("FixedClock needs a timezone-aware instant")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta
