"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

HISTORY_SIZE = 9

# Initial day bounds; they only narrow once readings fall inside them.
DAY_STATS_MIN_BOUND = 200
DAY_STATS_MAX_BOUND = 1600

# Sampling cadence assumed by the producers: ~12 readings per minute, five minutes.
ROLLOVER_SEED_READINGS = 12 * 5


@dataclass(frozen=True, slots=True)
class Reading:
    """A min/max power-draw sample from one machine."""

    min: int
    max: int
    timestamp: datetime

    def difference(self) -> int:
        return self.max - self.min


@dataclass(frozen=True, slots=True)
class ReadingBatch:
    """One reading per channel, submitted together."""

    a0: Reading
    a1: Reading
    a2: Reading
    a3: Reading


@dataclass(slots=True)
class DayStats:
    """Running statistics of reading differences for a calendar day."""

    day: date
    num_readings: int = 0
    mean: float = 0.0
    min: int = DAY_STATS_MIN_BOUND
    max: int = DAY_STATS_MAX_BOUND

    def include(self, difference: int) -> None:
        self.mean = (self.mean * self.num_readings + difference) / (self.num_readings + 1)
        self.num_readings += 1
        self.min = min(self.min, difference)
        self.max = max(self.max, difference)
