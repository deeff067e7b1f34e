"""In-memory request, error and calculation counters."""

import time
import threading
from typing import Callable, NamedTuple


class MetricsSnapshot(NamedTuple):
    """Point-in-time copy of the counters.

    Attributes:
        request_count: Requests seen since start.
        error_count: Classified request errors since start.
        calculation_count: Successful calculations since start.
        uptime_seconds: Seconds since the state was created.
    """

    request_count: int
    error_count: int
    calculation_count: int
    uptime_seconds: float


class MetricsState:
    """Thread-safe counters owned by one application instance.

    Counters only ever increase; they reset when a new instance is
    created, i.e. when the service restarts.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """Initialize counters at zero.

        Args:
            clock: Monotonic time source used for uptime.
        """
        self._clock = clock
        self.started_at = clock()
        self.request_count = 0
        self.error_count = 0
        self.calculation_count = 0
        self._lock = threading.Lock()

    def record_request(self) -> None:
        with self._lock:
            self.request_count += 1

    def record_error(self) -> None:
        with self._lock:
            self.error_count += 1

    def record_calculation(self) -> None:
        with self._lock:
            self.calculation_count += 1

    def uptime_seconds(self) -> float:
        """Seconds elapsed since the state was created."""
        return max(0.0, self._clock() - self.started_at)

    def snapshot(self) -> MetricsSnapshot:
        """Read all counters consistently."""
        with self._lock:
            return MetricsSnapshot(
                request_count=self.request_count,
                error_count=self.error_count,
                calculation_count=self.calculation_count,
                uptime_seconds=self.uptime_seconds(),
            )
