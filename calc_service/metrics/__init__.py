"""Metrics module - counters, exposition and request counting.

The telemetry endpoints live in ``calc_service.metrics.router``.
"""

from .state import MetricsState, MetricsSnapshot
from .exposition import memory_usage, render_metrics
from .middleware import RequestMetricsMiddleware


__all__ = [
    "MetricsState",
    "MetricsSnapshot",
    "memory_usage",
    "render_metrics",
    "RequestMetricsMiddleware",
]
