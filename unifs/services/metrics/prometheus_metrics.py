"""Prometheus metrics implementation using prometheus_client."""

from __future__ import annotations

from unifs.services.metrics.interface import MetricsInterface
from unifs.services.secrets.interface import SecretsInterface


def _label_names(tags: dict[str, str] | None) -> list[str]:
    return sorted(tags.keys()) if tags else []


def _label_values(names: list[str], tags: dict[str, str] | None) -> list[str]:
    if not tags:
        return []
    return [tags[n] for n in names]


class PrometheusMetrics(MetricsInterface):
    """Metrics exposed on a Prometheus scrape endpoint.

    Config (via secrets):
        METRICS_PROMETHEUS_PORT - Port to expose /metrics on (default: 9091).
                                  Empty or 0 disables the HTTP server.

    Dashes and dots in metric names are replaced with underscores.
    """

    def __init__(self, secrets: SecretsInterface) -> None:
        import prometheus_client as prom

        self._prom = prom
        self._counters: dict[str, prom.Counter] = {}
        self._gauges: dict[str, prom.Gauge] = {}
        self._histograms: dict[str, prom.Histogram] = {}

        port_str = secrets.get_or_default("METRICS_PROMETHEUS_PORT", "9091")
        port = int(port_str) if port_str else 0
        if port:
            prom.start_http_server(port)

    @staticmethod
    def _sanitize(name: str) -> str:
        return name.replace("-", "_").replace(".", "_")

    def _metric(self, cache: dict, factory, name: str, tags: dict[str, str] | None):
        safe = self._sanitize(name)
        label_names = _label_names(tags)
        key = f"{safe}:{','.join(label_names)}"
        if key not in cache:
            cache[key] = factory(safe, safe, label_names)
        metric = cache[key]
        if label_names:
            return metric.labels(*_label_values(label_names, tags))
        return metric

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        self._metric(self._counters, self._prom.Counter, name, tags).inc(value)

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._metric(self._gauges, self._prom.Gauge, name, tags).set(value)

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._metric(self._histograms, self._prom.Histogram, name, tags).observe(value)
