"""
Time sources for the needs system.

Everything that needs "now" takes a clock instead of calling datetime.now()
itself, so elapsed time can be simulated in tests and tools.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

class Clock(ABC):
    """Supplies the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        pass

class SystemClock(Clock):
    """Wall-clock time in local naive datetimes."""

    def now(self) -> datetime:
        return datetime.now()

class ManualClock(Clock):
    """
    A clock that only moves when told to.

    Args:
        start: Initial instant. Defaults to the current wall-clock time.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = start if start is not None else datetime.now()

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime) -> None:
        self._now = instant

    def advance(self, hours: float = 0, minutes: float = 0, seconds: float = 0) -> datetime:
        """Move the clock forward (or backward, for negative values) and return the new instant."""
        self._now += timedelta(hours=hours, minutes=minutes, seconds=seconds)
        return self._now
