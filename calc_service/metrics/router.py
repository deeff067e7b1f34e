"""FastAPI router for health and metrics endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from calc_service.dependencies import get_metrics

from .exposition import memory_usage, render_metrics
from .schemas import HealthResponse
from .state import MetricsState


router = APIRouter(tags=["telemetry"])


def utc_timestamp() -> str:
    """Current UTC time as e.g. 2024-01-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health_check(
    metrics: Annotated[MetricsState, Depends(get_metrics)],
) -> HealthResponse:
    return HealthResponse(timestamp=utc_timestamp(), uptime=metrics.uptime_seconds())


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics_endpoint(
    metrics: Annotated[MetricsState, Depends(get_metrics)],
) -> PlainTextResponse:
    """Counters and gauges in Prometheus text format."""
    return PlainTextResponse(render_metrics(metrics.snapshot(), memory_usage()))
