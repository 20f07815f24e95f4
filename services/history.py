"""Rolling per-channel power history and its day statistics."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence, Tuple

from models.records import (
    HISTORY_SIZE,
    ROLLOVER_SEED_READINGS,
    DayStats,
    Reading,
    ReadingBatch,
)
from services.clock import Clock

logger = logging.getLogger(__name__)

CHANNELS: Tuple[str, ...] = ("a0", "a1", "a2", "a3")


class ChannelHistory:
    """Fixed-size window of readings for one channel plus its day statistics.

    The window is a circular buffer that is full from construction onward:
    every push overwrites the oldest slot, so its length never changes.
    """

    def __init__(
        self, timestamp: datetime, capacity: int = HISTORY_SIZE, name: str = ""
    ) -> None:
        if capacity < 1:
            raise ValueError("Channel history capacity must be at least 1.")
        self._slots: List[Reading] = [Reading(0, 0, timestamp)] * capacity
        self._next = 0
        self.name = name
        self.today = DayStats(day=timestamp.date())
        self.yesterday: Optional[DayStats] = None

    @classmethod
    def from_state(
        cls,
        readings: Sequence[Reading],
        today: DayStats,
        yesterday: Optional[DayStats] = None,
        name: str = "",
        capacity: int = HISTORY_SIZE,
    ) -> ChannelHistory:
        """Rebuild a history from decoded state, oldest reading first."""
        if capacity < 1 or len(readings) != capacity:
            raise ValueError(
                f"Channel history needs exactly {capacity} readings, got {len(readings)}."
            )
        history = cls(readings[-1].timestamp, capacity=capacity, name=name)
        history._slots = list(readings)
        history.today = replace(today)
        history.yesterday = replace(yesterday) if yesterday is not None else None
        return history

    def readings(self) -> List[Reading]:
        """Window contents from oldest to newest."""
        return self._slots[self._next:] + self._slots[: self._next]

    def latest(self) -> Reading:
        return self._slots[self._next - 1]

    def push(self, reading: Reading, today: date) -> None:
        self._slots[self._next] = reading
        self._next = (self._next + 1) % len(self._slots)

        self.today.include(reading.difference())

        if self.today.day != today:
            self._roll_over(today)

    def _roll_over(self, today: date) -> None:
        # Mean and bounds carry over into the new day; only the weight drops.
        previous_day = self.today.day
        self.yesterday = replace(self.today)
        self.today.num_readings = ROLLOVER_SEED_READINGS
        self.today.day = today
        logger.info(
            "Day statistics rolled over.",
            extra={
                "channel": self.name or None,
                "day": today.isoformat(),
                "previous_day": previous_day.isoformat(),
                "mean": self.today.mean,
                "min_value": self.today.min,
                "max_value": self.today.max,
            },
        )

    def average_reading(self) -> Reading:
        count = len(self._slots)
        min_total = sum(reading.min for reading in self._slots)
        max_total = sum(reading.max for reading in self._slots)
        return Reading(
            min=int(min_total / count),
            max=int(max_total / count),
            timestamp=self.latest().timestamp,
        )

    def median_reading(self) -> Reading:
        ordered = sorted(self._slots, key=lambda reading: reading.difference())
        median = ordered[len(ordered) // 2]
        return Reading(min=median.min, max=median.max, timestamp=self.latest().timestamp)


class PowerHistory:
    """The four channel histories, updated together from one reading batch."""

    def __init__(self, clock: Clock, capacity: int = HISTORY_SIZE) -> None:
        self._clock = clock
        timestamp = clock.now()
        self.a0 = ChannelHistory(timestamp, capacity, "a0")
        self.a1 = ChannelHistory(timestamp, capacity, "a1")
        self.a2 = ChannelHistory(timestamp, capacity, "a2")
        self.a3 = ChannelHistory(timestamp, capacity, "a3")

    @classmethod
    def restore(cls, clock: Clock, channels: Dict[str, ChannelHistory]) -> PowerHistory:
        """Assemble a history from previously decoded channel state."""
        missing = [name for name in CHANNELS if name not in channels]
        if missing:
            raise ValueError(f"Missing channel histories: {', '.join(missing)}")
        history = cls.__new__(cls)
        history._clock = clock
        for name in CHANNELS:
            setattr(history, name, channels[name])
        return history

    def channels(self) -> Dict[str, ChannelHistory]:
        return {name: getattr(self, name) for name in CHANNELS}

    def update(self, batch: ReadingBatch) -> None:
        """Push one reading into every channel.

        The calendar date is read once and shared by all four channels.
        """
        today = self._clock.today()
        for name, history in self.channels().items():
            reading: Reading = getattr(batch, name)
            history.push(reading, today)
            logger.debug(
                "Reading recorded.",
                extra={
                    "channel": name,
                    "num_readings": history.today.num_readings,
                    "mean": history.today.mean,
                },
            )


def construct(clock: Clock) -> PowerHistory:
    return PowerHistory(clock)
