"""Unit tests for the reading and day statistics value types."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime

import pytest

from models.records import (
    DAY_STATS_MAX_BOUND,
    DAY_STATS_MIN_BOUND,
    DayStats,
    Reading,
)


def test_reading_difference_is_max_minus_min() -> None:
    reading = Reading(min=120, max=870, timestamp=datetime(2024, 1, 1))

    assert reading.difference() == 750


def test_reading_is_immutable() -> None:
    reading = Reading(min=1, max=2, timestamp=datetime(2024, 1, 1))

    with pytest.raises(dataclasses.FrozenInstanceError):
        reading.min = 5  # type: ignore[misc]


def test_new_day_stats_start_from_sentinel_bounds() -> None:
    stats = DayStats(day=date(2024, 1, 1))

    assert stats.num_readings == 0
    assert stats.mean == 0.0
    assert stats.min == DAY_STATS_MIN_BOUND == 200
    assert stats.max == DAY_STATS_MAX_BOUND == 1600


def test_include_updates_running_mean_and_count() -> None:
    stats = DayStats(day=date(2024, 1, 1))

    for value in (300, 500, 1000):
        stats.include(value)

    assert stats.num_readings == 3
    assert stats.mean == pytest.approx(600.0)


def test_include_widens_bounds_only_when_exceeded() -> None:
    stats = DayStats(day=date(2024, 1, 1))

    stats.include(150)
    stats.include(1800)
    stats.include(700)

    assert stats.min == 150
    assert stats.max == 1800
