from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

LOCAL = timezone(timedelta(hours=2))


class FakeClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()

    def advance(self, **delta: float) -> None:
        self.current = self.current + timedelta(**delta)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 10, 12, 0, tzinfo=LOCAL))
