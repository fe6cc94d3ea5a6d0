"""
Time source and calendar-day helpers.
"""
from datetime import datetime, timezone, date, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from leitner.core.config import settings


def get_zoneinfo(tz_name: Optional[str] = None) -> ZoneInfo:
    """Return a ZoneInfo for the given tz_name or the configured default."""
    return ZoneInfo(tz_name or settings.timezone)


def start_of_day(dt: datetime, tz_name: Optional[str] = None) -> date:
    """
    Truncate a timestamp to its calendar day.

    Naive datetimes are assumed to be UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(get_zoneinfo(tz_name)).date()


class Clock:
    """Wall clock. Swap for FixedClock in tests."""

    def __init__(self, tz_name: Optional[str] = None):
        self.tz_name = tz_name

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return start_of_day(self.now(), self.tz_name)


class FixedClock(Clock):
    """Clock frozen at a given instant; advance() moves it forward."""

    def __init__(self, instant: datetime, tz_name: Optional[str] = None):
        super().__init__(tz_name)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def advance(self, delta: timedelta) -> None:
        self.instant = self.instant + delta


def get_clock() -> Clock:
    """Dependency for getting the configured clock."""
    return Clock(settings.timezone)
