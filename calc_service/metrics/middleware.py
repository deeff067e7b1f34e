"""Request counting and access logging middleware."""

from typing import Callable

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


logger = structlog.get_logger("access")

# Scraped and probed constantly; counted but not logged
QUIET_PATHS = frozenset({"/health", "/metrics"})


class RequestMetricsMiddleware(BaseHTTPMiddleware):
    """Count every request and log the ones that are not telemetry."""

    async def dispatch(self, request: Request, call_next: Callable):
        request.app.state.metrics.record_request()
        if request.url.path not in QUIET_PATHS:
            logger.info(
                "request_received",
                method=request.method,
                path=request.url.path,
            )
        return await call_next(request)
