from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from services.monitor import PowerMonitor, build_default_monitor
from settings import get_settings


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def get_monitor() -> PowerMonitor:
    return build_default_monitor()


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
def ui_index(
    request: Request,
    monitor: PowerMonitor = Depends(get_monitor),
) -> HTMLResponse:
    snapshot = monitor.snapshot()
    channels = [
        {
            "name": name,
            "current": snapshot.current[name],
            "state": channel,
        }
        for name, channel in snapshot.channels.items()
    ]
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {
            "channels": channels,
            "refresh_seconds": get_settings().ui_refresh_seconds,
        },
    )
