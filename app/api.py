"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from app.schemas import PowerReadings, PowerResponse
from services.monitor import PowerMonitor, build_default_monitor

router = APIRouter()


def get_monitor() -> PowerMonitor:
    return build_default_monitor()


# Power handlers are plain ``def`` so they run on the threadpool; the
# monitor's reader-writer lock blocks threads, never the event loop.


@router.get(
    "/power",
    response_model=PowerResponse,
    summary="Fetch the current power snapshot for all channels.",
)
def get_latest_readings(
    monitor: PowerMonitor = Depends(get_monitor),
) -> PowerResponse:
    return PowerResponse.from_snapshot(monitor.snapshot())


@router.post(
    "/power",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit a new batch of readings, one per channel.",
)
def set_latest_readings(
    readings: PowerReadings,
    monitor: PowerMonitor = Depends(get_monitor),
) -> str:
    monitor.submit(readings.to_domain())
    return "Updated."


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /power for readings and /ui for the dashboard."}
