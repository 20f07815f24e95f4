from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_power


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the laundry power monitor service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def parse_reading(value: str, timestamp: datetime) -> Dict[str, Any]:
    """Turn ``MIN:MAX`` into a reading payload stamped with ``timestamp``."""
    low, sep, high = value.partition(":")
    if not sep:
        raise typer.BadParameter(f"Reading {value!r} must look like MIN:MAX.")
    try:
        parsed_min = int(low)
        parsed_max = int(high)
    except ValueError as exc:
        raise typer.BadParameter(f"Reading {value!r} must contain integers.") from exc
    return {"min": parsed_min, "max": parsed_max, "timestamp": timestamp.isoformat()}


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Power monitor base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Show the current reading and day statistics for every channel."""
    state = _get_state(ctx)
    render_power(state.client.get_power())


@app.command("submit")
def submit_command(
    ctx: typer.Context,
    a0: str = typer.Argument(..., help="Channel a0 reading as MIN:MAX."),
    a1: str = typer.Argument(..., help="Channel a1 reading as MIN:MAX."),
    a2: str = typer.Argument(..., help="Channel a2 reading as MIN:MAX."),
    a3: str = typer.Argument(..., help="Channel a3 reading as MIN:MAX."),
) -> None:
    """Submit one reading per channel, stamped with the local time."""
    state = _get_state(ctx)
    timestamp = datetime.now().astimezone()
    readings = {
        name: parse_reading(value, timestamp)
        for name, value in (("a0", a0), ("a1", a1), ("a2", a2), ("a3", a3))
    }
    reply = state.client.submit_readings(readings)
    typer.secho(reply or "Submitted.", fg=typer.colors.GREEN)
