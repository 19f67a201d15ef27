# src/response_kit/observability/base.py

from dataclasses import dataclass, field
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for cleaning and segmentation metrics.

    Names come from ``response_kit.observability.names``. Durations are in
    milliseconds; a Prometheus or StatsD adapter converts units itself.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Time spent in one clean or segment call."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Monotonic counter, e.g. sections emitted across all parses."""
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Point-in-time value, e.g. line count of the last input."""
        ...


class NoOpMetricsHook:
    """Default hook: parsing never depends on a metrics backend being present."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        return None


@dataclass
class InMemoryMetricsHook:
    """Keeps every recorded value in memory.

    Meant for tests and local debugging, not for long-running processes.
    Labels are accepted but not stored.
    """

    latencies: dict[str, list[float]] = field(default_factory=dict)
    counters: dict[str, int] = field(default_factory=dict)
    gauges: dict[str, float] = field(default_factory=dict)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.setdefault(name, []).append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[name] = value
