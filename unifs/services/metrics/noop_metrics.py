from unifs.services.metrics.interface import MetricsInterface


class NoopMetrics(MetricsInterface):
    """Default sink for managers and the CLI when no ``--metrics`` is selected."""

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        return None

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        return None

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        return None
