"""Prometheus text exposition for the service counters."""

import resource
import sys
from pathlib import Path

from .state import MetricsSnapshot


STATM_PATH = Path("/proc/self/statm")


def memory_usage() -> dict[str, int]:
    """Collect process memory figures in bytes.

    Returns:
        Mapping of memory type to bytes. "rss" is only present where
        /proc is available; "maxRss" is always present.
    """
    usage: dict[str, int] = {}
    if STATM_PATH.exists():
        resident_pages = int(STATM_PATH.read_text().split()[1])
        usage["rss"] = resident_pages * resource.getpagesize()

    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is bytes on macOS and kilobytes elsewhere
    usage["maxRss"] = max_rss if sys.platform == "darwin" else max_rss * 1024
    return usage


def _block(name: str, help_text: str, metric_type: str, samples: list[str]) -> str:
    lines = [f"# HELP {name} {help_text}", f"# TYPE {name} {metric_type}"]
    lines.extend(samples)
    return "\n".join(lines) + "\n"


def render_metrics(snapshot: MetricsSnapshot, memory: dict[str, int]) -> str:
    """Render counters and gauges in Prometheus text format.

    Args:
        snapshot: Counter values to expose.
        memory: Memory figures keyed by type, exposed as labelled samples.

    Returns:
        The exposition body, blocks separated by blank lines.
    """
    memory_samples = [
        f'nodejs_memory_usage_bytes{{type="{kind}"}} {value}'
        for kind, value in memory.items()
    ]
    blocks = [
        _block(
            "http_requests_total",
            "Total number of HTTP requests",
            "counter",
            [f"http_requests_total {snapshot.request_count}"],
        ),
        _block(
            "http_errors_total",
            "Total number of HTTP errors",
            "counter",
            [f"http_errors_total {snapshot.error_count}"],
        ),
        _block(
            "calculations_total",
            "Total number of calculations performed",
            "counter",
            [f"calculations_total {snapshot.calculation_count}"],
        ),
        _block(
            "nodejs_memory_usage_bytes",
            "Memory usage in bytes",
            "gauge",
            memory_samples,
        ),
        _block(
            "nodejs_uptime_seconds",
            "Uptime in seconds",
            "gauge",
            [f"nodejs_uptime_seconds {snapshot.uptime_seconds}"],
        ),
    ]
    return "\n".join(blocks)
