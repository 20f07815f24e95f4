"""Read-only views of the power history."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from models.records import DayStats, Reading
from services.history import ChannelHistory, PowerHistory


@dataclass(frozen=True)
class ChannelSnapshot:
    """Detached copy of one channel's window and day statistics."""

    readings: Tuple[Reading, ...]
    today: DayStats
    yesterday: Optional[DayStats]

    @classmethod
    def capture(cls, history: ChannelHistory) -> ChannelSnapshot:
        return cls(
            readings=tuple(history.readings()),
            today=replace(history.today),
            yesterday=replace(history.yesterday) if history.yesterday is not None else None,
        )


@dataclass(frozen=True)
class PowerSnapshot:
    """Full history state plus the median "current" reading per channel."""

    channels: Dict[str, ChannelSnapshot]
    current: Dict[str, Reading]


class SnapshotBuilder:
    """Derives the externally visible summary without mutating the history."""

    def build(self, history: PowerHistory) -> PowerSnapshot:
        channels: Dict[str, ChannelSnapshot] = {}
        current: Dict[str, Reading] = {}
        for name, channel in history.channels().items():
            channels[name] = ChannelSnapshot.capture(channel)
            current[name] = channel.median_reading()
        return PowerSnapshot(channels=channels, current=current)


def snapshot(history: PowerHistory) -> PowerSnapshot:
    return SnapshotBuilder().build(history)
