"""Unit tests for counters, exposition and telemetry endpoints."""

import re
from datetime import datetime
from unittest.mock import patch

import pytest

from calc_service.metrics.exposition import memory_usage, render_metrics
from calc_service.metrics.router import health_check, utc_timestamp
from calc_service.metrics.state import MetricsSnapshot, MetricsState


class TestMetricsState:
    """Tests for MetricsState counters."""

    def test_starts_at_zero(self):
        snapshot = MetricsState().snapshot()

        assert snapshot.request_count == 0
        assert snapshot.error_count == 0
        assert snapshot.calculation_count == 0

    def test_counters_increment(self):
        state = MetricsState()

        state.record_request()
        state.record_request()
        state.record_error()
        state.record_calculation()

        snapshot = state.snapshot()
        assert snapshot.request_count == 2
        assert snapshot.error_count == 1
        assert snapshot.calculation_count == 1

    def test_uptime_uses_clock(self):
        """Test uptime is measured from creation with the given clock."""
        ticks = iter([100.0, 112.5])
        state = MetricsState(clock=lambda: next(ticks))

        assert state.uptime_seconds() == 12.5

    def test_uptime_never_negative(self):
        ticks = iter([100.0, 99.0])
        state = MetricsState(clock=lambda: next(ticks))

        assert state.uptime_seconds() == 0.0


class TestRenderMetrics:
    """Tests for Prometheus text rendering."""

    def _render(self, memory=None):
        snapshot = MetricsSnapshot(
            request_count=7,
            error_count=2,
            calculation_count=4,
            uptime_seconds=3.5,
        )
        return render_metrics(snapshot, memory or {"rss": 1024, "maxRss": 2048})

    def test_contains_required_metric_names(self):
        body = self._render()

        for name in (
            "http_requests_total",
            "http_errors_total",
            "calculations_total",
            "nodejs_memory_usage_bytes",
            "nodejs_uptime_seconds",
        ):
            assert f"# HELP {name} " in body
            assert f"# TYPE {name} " in body

    def test_counter_samples(self):
        lines = self._render().splitlines()

        assert "http_requests_total 7" in lines
        assert "http_errors_total 2" in lines
        assert "calculations_total 4" in lines
        assert "nodejs_uptime_seconds 3.5" in lines

    def test_memory_samples_are_labelled(self):
        lines = self._render().splitlines()

        assert 'nodejs_memory_usage_bytes{type="rss"} 1024' in lines
        assert 'nodejs_memory_usage_bytes{type="maxRss"} 2048' in lines

    def test_metric_types(self):
        body = self._render()

        assert "# TYPE http_requests_total counter" in body
        assert "# TYPE nodejs_memory_usage_bytes gauge" in body


class TestMemoryUsage:
    """Tests for process memory collection."""

    def test_reports_max_rss(self):
        usage = memory_usage()

        assert usage["maxRss"] > 0

    def test_rss_skipped_without_proc(self, tmp_path):
        with patch("calc_service.metrics.exposition.STATM_PATH", tmp_path / "absent"):
            usage = memory_usage()

        assert "rss" not in usage
        assert "maxRss" in usage


class TestTelemetryEndpoints:
    """Tests for /health and /metrics."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime"] >= 0
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", data["timestamp"])
        datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))

    def test_metrics(self, client):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        for name in (
            "http_requests_total",
            "calculations_total",
            "nodejs_memory_usage_bytes",
            "nodejs_uptime_seconds",
        ):
            assert name in response.text


@pytest.mark.asyncio
async def test_health_check_reports_state_uptime():
    """Test the handler reads uptime from the app's MetricsState."""
    ticks = iter([10.0, 40.0])
    state = MetricsState(clock=lambda: next(ticks))

    response = await health_check(metrics=state)

    assert response.status == "healthy"
    assert response.uptime == 30.0


def test_utc_timestamp_format():
    assert utc_timestamp().endswith("Z")
    assert "+00:00" not in utc_timestamp()
