from __future__ import annotations

from abc import ABC, abstractmethod


class MetricsInterface(ABC):
    """Sink for adapter operation counters, registry gauges and latency histograms.

    Tags are flat string maps such as ``{"adapter": "default", "outcome": "ok"}``.
    """

    @abstractmethod
    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None: ...

    @abstractmethod
    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None: ...

    @abstractmethod
    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        """Record one observation, e.g. an operation duration in seconds."""
