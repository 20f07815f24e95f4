from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_LOG_LEVEL_ENV = "LOG_LEVEL"
_TIMEZONE_ENV = "POWER_TIMEZONE"
_UI_REFRESH_ENV = "UI_REFRESH_SECONDS"


@dataclass(frozen=True)
class Settings:
    log_level: str
    timezone: Optional[str]
    ui_refresh_seconds: int


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_refresh_seconds(default: int) -> int:
    value = os.getenv(_UI_REFRESH_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level("INFO"),
        timezone=_read_optional_env(_TIMEZONE_ENV, None),
        ui_refresh_seconds=_read_refresh_seconds(10),
    )
