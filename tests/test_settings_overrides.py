from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from cli.config import DEFAULT_TIMEOUT, load_config
from services.clock import build_clock
from services.monitor import build_default_monitor
from settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_caches():
    get_settings.cache_clear()
    build_default_monitor.cache_clear()
    yield
    build_default_monitor.cache_clear()
    get_settings.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    monkeypatch.setenv("POWER_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("UI_REFRESH_SECONDS", "0")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.timezone == "Europe/Berlin"
    assert settings.ui_refresh_seconds == 0

    monitor = build_default_monitor()
    clock = monitor.history._clock
    assert clock.tz == ZoneInfo("Europe/Berlin")


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "   ")
    monkeypatch.setenv("POWER_TIMEZONE", "")
    monkeypatch.setenv("UI_REFRESH_SECONDS", "soon")

    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.timezone is None
    assert settings.ui_refresh_seconds == 10


def test_unknown_time_zone_uses_system_zone() -> None:
    clock = build_clock("Nowhere/Special")

    assert clock.tz is None
    assert clock.now().tzinfo is not None


def test_cli_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://power.example/")
    monkeypatch.setenv("CLI_HTTP_TIMEOUT", "-3")

    config = load_config()

    assert config.base_url == "http://power.example"
    assert config.timeout == DEFAULT_TIMEOUT
