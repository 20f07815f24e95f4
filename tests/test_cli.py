from __future__ import annotations

from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from cli.app import app


def _channel(difference: int) -> Dict[str, Any]:
    reading = {"min": 100, "max": 100 + difference, "timestamp": "2024-03-10T12:00:00+02:00"}
    return {
        "readings": [reading] * 9,
        "today_stats": {
            "num_readings": 42,
            "mean": 512.4,
            "min": 200,
            "max": 1600,
            "day": "2024-03-10",
        },
        "yesterday_stats": None,
    }


class StubClient:
    def __init__(self, config) -> None:
        self.config = config
        self.submitted: List[Dict[str, Dict[str, Any]]] = []
        self.power_payload: Dict[str, Any] = {
            "history": {name: _channel(300) for name in ("a0", "a1", "a2", "a3")},
            **{
                name: {"min": 100, "max": 400, "timestamp": "2024-03-10T12:00:00+02:00"}
                for name in ("a0", "a1", "a2", "a3")
            },
        }
        self.closed = False

    def get_power(self) -> Dict[str, Any]:
        return self.power_payload

    def submit_readings(self, readings: Dict[str, Dict[str, Any]]) -> str:
        self.submitted.append(readings)
        return "Updated."

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _install_stub(monkeypatch, stub: StubClient) -> None:
    def factory(config):
        stub.config = config
        return stub

    monkeypatch.setattr("cli.app.ApiClient", factory)


def test_status_renders_every_channel(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["status"])

    assert result.exit_code == 0
    for name in ("a0", "a1", "a2", "a3"):
        assert f"Channel {name}" in result.stdout
    assert "current: 300" in result.stdout
    assert "today (2024-03-10): readings=42 mean=512.4" in result.stdout
    assert "yesterday: no data" in result.stdout
    assert stub.closed is True


def test_submit_posts_one_reading_per_channel(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["submit", "10:400", "20:500", "30:600", "5:700"])

    assert result.exit_code == 0
    assert "Updated." in result.stdout
    assert len(stub.submitted) == 1
    readings = stub.submitted[0]
    assert readings["a0"]["min"] == 10
    assert readings["a0"]["max"] == 400
    assert readings["a3"]["min"] == 5
    timestamps = {reading["timestamp"] for reading in readings.values()}
    assert len(timestamps) == 1


def test_submit_rejects_malformed_reading(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["submit", "10:400", "20-500", "30:600", "40:700"])

    assert result.exit_code != 0
    assert stub.submitted == []


def test_base_url_option_reaches_client(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["--base-url", "http://power.local:9000/", "status"])

    assert result.exit_code == 0
    assert stub.config.base_url == "http://power.local:9000"
