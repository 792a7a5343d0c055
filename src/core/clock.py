"""Injectable time source."""

from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from core.config import settings


class Clock(Protocol):
    """Anything that can tell the current, timezone-aware time."""

    def now(self) -> datetime:
        """Return the current time."""
        ...


class SystemClock:
    """Wall clock in the configured reference timezone."""

    def __init__(self, timezone: str = settings.reference_timezone) -> None:
        self._tz = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._tz)
