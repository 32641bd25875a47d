from __future__ import annotations

from unifs.services.metrics.interface import MetricsInterface


class MemoryMetrics(MetricsInterface):
    """In-memory metrics for test assertions on metric values.

    Values are keyed by metric name; ``tagged`` additionally keeps every
    observation with its tags so tests can filter on them.
    """

    def __init__(self) -> None:
        self.counters: dict[str, float] = {}
        self.gauges: dict[str, float] = {}
        self.histograms: dict[str, list[float]] = {}
        self.tagged: list[tuple[str, float, dict[str, str]]] = []

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        self.counters[name] = self.counters.get(name, 0) + value
        self.tagged.append((name, value, dict(tags or {})))

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.gauges[name] = value
        self.tagged.append((name, value, dict(tags or {})))

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.histograms.setdefault(name, []).append(value)
        self.tagged.append((name, value, dict(tags or {})))

    def tags_for(self, name: str) -> list[dict[str, str]]:
        return [tags for metric, _, tags in self.tagged if metric == name]
