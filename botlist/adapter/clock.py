"""Clock implementations."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from botlist.domain.service import Clock


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(timezone.utc)


class ManualClock(Clock):
    """Clock that only moves when told to.

    Used in tests to step through cooldown windows without sleeping.
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        """Return the current simulated time."""
        return self._now

    def set(self, moment: datetime) -> None:
        """Jump to a given instant."""
        self._now = moment

    def advance(self, delta: timedelta) -> datetime:
        """Move forward by ``delta`` and return the new time."""
        self._now = self._now + delta
        return self._now
