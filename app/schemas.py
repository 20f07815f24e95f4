"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from models.day_codec import DayFormatError, decode_day, encode_day
from models.records import HISTORY_SIZE, DayStats, Reading, ReadingBatch
from services.clock import Clock
from services.history import CHANNELS, ChannelHistory, PowerHistory
from services.snapshot import ChannelSnapshot, PowerSnapshot

INT16_MIN = -32768
INT16_MAX = 32767


class ReadingModel(BaseModel):
    """A min/max power sample as exchanged over the wire."""

    min: int = Field(..., ge=INT16_MIN, le=INT16_MAX)
    max: int = Field(..., ge=INT16_MIN, le=INT16_MAX)
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def attach_local_zone(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.astimezone()
        return value

    @model_validator(mode="after")
    def check_difference_range(self) -> ReadingModel:
        # Day statistics store the difference, so it must fit the same range.
        if not INT16_MIN <= self.max - self.min <= INT16_MAX:
            raise ValueError(
                f"Difference max - min = {self.max - self.min} is outside the 16-bit range."
            )
        return self

    @classmethod
    def from_domain(cls, reading: Reading) -> ReadingModel:
        return cls(min=reading.min, max=reading.max, timestamp=reading.timestamp)

    def to_domain(self) -> Reading:
        return Reading(min=self.min, max=self.max, timestamp=self.timestamp)


class DayStatsModel(BaseModel):
    """Running statistics for one day; ``day`` travels as ``YYYY-MM-DD``."""

    num_readings: int = Field(..., ge=0)
    mean: float
    min: int = Field(..., ge=INT16_MIN, le=INT16_MAX)
    max: int = Field(..., ge=INT16_MIN, le=INT16_MAX)
    day: date

    @field_validator("day", mode="before")
    @classmethod
    def parse_day(cls, value: Any) -> date:
        if isinstance(value, datetime):
            raise DayFormatError("Day must not carry a time component.")
        if isinstance(value, date):
            return value
        return decode_day(value)

    @field_serializer("day")
    def format_day(self, value: date) -> str:
        return encode_day(value)

    @classmethod
    def from_domain(cls, stats: DayStats) -> DayStatsModel:
        return cls(
            num_readings=stats.num_readings,
            mean=stats.mean,
            min=stats.min,
            max=stats.max,
            day=stats.day,
        )

    def to_domain(self) -> DayStats:
        return DayStats(
            day=self.day,
            num_readings=self.num_readings,
            mean=self.mean,
            min=self.min,
            max=self.max,
        )


class ChannelHistoryModel(BaseModel):
    """Window of readings (oldest first) and day statistics for one channel."""

    readings: List[ReadingModel] = Field(
        ..., min_length=HISTORY_SIZE, max_length=HISTORY_SIZE
    )
    today_stats: DayStatsModel
    yesterday_stats: Optional[DayStatsModel] = None

    @classmethod
    def from_snapshot(cls, channel: ChannelSnapshot) -> ChannelHistoryModel:
        return cls(
            readings=[ReadingModel.from_domain(reading) for reading in channel.readings],
            today_stats=DayStatsModel.from_domain(channel.today),
            yesterday_stats=(
                DayStatsModel.from_domain(channel.yesterday)
                if channel.yesterday is not None
                else None
            ),
        )

    def to_domain(self, name: str = "") -> ChannelHistory:
        return ChannelHistory.from_state(
            [reading.to_domain() for reading in self.readings],
            today=self.today_stats.to_domain(),
            yesterday=self.yesterday_stats.to_domain() if self.yesterday_stats else None,
            name=name,
        )


class PowerHistoryModel(BaseModel):
    """History of all four channels."""

    a0: ChannelHistoryModel
    a1: ChannelHistoryModel
    a2: ChannelHistoryModel
    a3: ChannelHistoryModel

    @classmethod
    def from_snapshot(cls, snapshot: PowerSnapshot) -> PowerHistoryModel:
        return cls(
            **{
                name: ChannelHistoryModel.from_snapshot(snapshot.channels[name])
                for name in CHANNELS
            }
        )

    def to_domain(self, clock: Clock) -> PowerHistory:
        channels: Dict[str, ChannelHistory] = {
            name: getattr(self, name).to_domain(name) for name in CHANNELS
        }
        return PowerHistory.restore(clock, channels)


class PowerReadings(BaseModel):
    """Batch of readings submitted by a producer, one per channel."""

    a0: ReadingModel
    a1: ReadingModel
    a2: ReadingModel
    a3: ReadingModel

    def to_domain(self) -> ReadingBatch:
        return ReadingBatch(
            a0=self.a0.to_domain(),
            a1=self.a1.to_domain(),
            a2=self.a2.to_domain(),
            a3=self.a3.to_domain(),
        )


class PowerResponse(BaseModel):
    """Full history plus the median "current" reading for each channel."""

    history: PowerHistoryModel
    a0: ReadingModel
    a1: ReadingModel
    a2: ReadingModel
    a3: ReadingModel

    @classmethod
    def from_snapshot(cls, snapshot: PowerSnapshot) -> PowerResponse:
        return cls(
            history=PowerHistoryModel.from_snapshot(snapshot),
            **{name: ReadingModel.from_domain(snapshot.current[name]) for name in CHANNELS},
        )

    def to_snapshot(self) -> PowerSnapshot:
        channels: Dict[str, ChannelSnapshot] = {}
        for name in CHANNELS:
            channel: ChannelHistoryModel = getattr(self.history, name)
            channels[name] = ChannelSnapshot(
                readings=tuple(reading.to_domain() for reading in channel.readings),
                today=channel.today_stats.to_domain(),
                yesterday=(
                    channel.yesterday_stats.to_domain() if channel.yesterday_stats else None
                ),
            )
        current = {name: getattr(self, name).to_domain() for name in CHANNELS}
        return PowerSnapshot(channels=channels, current=current)
