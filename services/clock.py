"""Wall-clock sources used by the power history."""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> datetime:
        ...

    def today(self) -> date:
        ...


class SystemClock:
    """Reads the current local time, optionally pinned to a named zone."""

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self.tz = tz

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now().astimezone()
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()


def build_clock(zone_name: Optional[str]) -> SystemClock:
    """Build a clock for ``zone_name``, falling back to the system zone."""
    if not zone_name:
        return SystemClock()
    try:
        return SystemClock(ZoneInfo(zone_name))
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown time zone %r; using the system local zone.", zone_name)
        return SystemClock()
