"""Date-only encoding for the ``day`` field of day statistics."""

from __future__ import annotations

import re
from datetime import date, datetime

DAY_FORMAT = "%Y-%m-%d"

_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DayFormatError(ValueError):
    """Raised when a day value is not a valid ``YYYY-MM-DD`` calendar date."""


def encode_day(day: date) -> str:
    return day.strftime(DAY_FORMAT)


def decode_day(value: str) -> date:
    if not isinstance(value, str) or not _DAY_PATTERN.match(value):
        raise DayFormatError(f"Day {value!r} does not match YYYY-MM-DD.")
    try:
        return datetime.strptime(value, DAY_FORMAT).date()
    except ValueError as exc:
        raise DayFormatError(f"Day {value!r} is not a valid calendar date.") from exc
