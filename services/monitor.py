"""Shared access to the process-wide power history."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from models.records import ReadingBatch
from services.clock import Clock, build_clock
from services.history import PowerHistory
from services.locking import ReadWriteLock
from services.snapshot import PowerSnapshot, SnapshotBuilder
from settings import get_settings

logger = logging.getLogger(__name__)


class PowerMonitor:
    """Serializes batch submissions and lets snapshots read in parallel."""

    def __init__(
        self,
        history: PowerHistory,
        builder: Optional[SnapshotBuilder] = None,
        lock: Optional[ReadWriteLock] = None,
    ) -> None:
        self.history = history
        self.builder = builder or SnapshotBuilder()
        self.lock = lock or ReadWriteLock()

    @classmethod
    def create(cls, clock: Clock) -> PowerMonitor:
        return cls(PowerHistory(clock))

    def submit(self, batch: ReadingBatch) -> None:
        """Record a reading batch with exclusive access to the history."""
        with self.lock.write_locked():
            self.history.update(batch)

    def snapshot(self) -> PowerSnapshot:
        """Capture the current state and median readings under a shared lock."""
        with self.lock.read_locked():
            return self.builder.build(self.history)


@lru_cache
def build_default_monitor() -> PowerMonitor:
    """Factory that wires the monitor to the configured wall clock."""
    settings = get_settings()
    clock = build_clock(settings.timezone)
    logger.info("Power history initialised.", extra={"day": clock.today().isoformat()})
    return PowerMonitor.create(clock)
