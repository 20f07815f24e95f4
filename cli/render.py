from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import typer

CHANNELS = ("a0", "a1", "a2", "a3")


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _difference(reading: Dict[str, Any]) -> Optional[int]:
    low, high = reading.get("min"), reading.get("max")
    if low is None or high is None:
        return None
    return high - low


def _render_stats(label: str, stats: Optional[Dict[str, Any]]) -> None:
    if not stats:
        typer.echo(f"  {label}: no data")
        return
    mean = stats.get("mean")
    mean_text = f"{mean:.1f}" if isinstance(mean, (int, float)) else mean
    typer.echo(
        f"  {label} ({stats.get('day')}): readings={stats.get('num_readings')} "
        f"mean={mean_text} min={stats.get('min')} max={stats.get('max')}"
    )


def render_power(payload: Dict[str, Any]) -> None:
    history = payload.get("history") or {}
    for index, name in enumerate(CHANNELS):
        if index:
            typer.echo()
        echo_heading(f"Channel {name}")
        current = payload.get(name) or {}
        echo_key_values(
            [
                ("current", _difference(current)),
                ("min", current.get("min")),
                ("max", current.get("max")),
                ("timestamp", current.get("timestamp")),
            ]
        )
        channel = history.get(name) or {}
        _render_stats("today", channel.get("today_stats"))
        _render_stats("yesterday", channel.get("yesterday_stats"))
        window = [_difference(reading) for reading in channel.get("readings") or []]
        typer.echo(f"  window: {' '.join(str(value) for value in window)}")
