"""Observability – NoopMetrics, the worker's default backend."""
from __future__ import annotations

from cron_worker.observability.metrics.ports import Counter, Gauge, Histogram, Labels, Metrics


class _Discard(Counter, Histogram, Gauge):
    def add(self, value: float = 1.0, labels: Labels = None) -> None:
        pass

    def record(self, value: float, labels: Labels = None) -> None:
        pass

    def set(self, value: float, labels: Labels = None) -> None:
        pass

    def inc(self, labels: Labels = None) -> None:
        pass

    def dec(self, labels: Labels = None) -> None:
        pass


_DISCARD = _Discard()


class NoopMetrics(Metrics):
    """Hands out one shared instrument that drops every observation."""

    def counter(self, name: str, description: str = "") -> Counter:
        return _DISCARD

    def histogram(self, name: str, description: str = "", unit: str = "ms") -> Histogram:
        return _DISCARD

    def gauge(self, name: str, description: str = "") -> Gauge:
        return _DISCARD


__all__ = ["NoopMetrics"]
