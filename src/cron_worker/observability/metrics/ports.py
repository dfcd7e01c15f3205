"""Observability – metric ports job executions are recorded through.

A backend implements :class:`Metrics`; the worker only ever asks it for the
instruments listed in :mod:`cron_worker.observability.metrics.scheduler`.
Every call carries ``{"job": handler_name}`` labels except the active-jobs
gauge, which is worker-wide.
"""
from __future__ import annotations

import abc

Labels = dict[str, str] | None


class Counter(abc.ABC):
    @abc.abstractmethod
    def add(self, value: float = 1.0, labels: Labels = None) -> None: ...


class Histogram(abc.ABC):
    @abc.abstractmethod
    def record(self, value: float, labels: Labels = None) -> None: ...


class Gauge(abc.ABC):
    @abc.abstractmethod
    def set(self, value: float, labels: Labels = None) -> None: ...

    @abc.abstractmethod
    def inc(self, labels: Labels = None) -> None: ...

    @abc.abstractmethod
    def dec(self, labels: Labels = None) -> None: ...


class Metrics(abc.ABC):
    """Port: factory for the scheduler's instruments."""

    @abc.abstractmethod
    def counter(self, name: str, description: str = "") -> Counter: ...

    @abc.abstractmethod
    def histogram(self, name: str, description: str = "", unit: str = "ms") -> Histogram: ...

    @abc.abstractmethod
    def gauge(self, name: str, description: str = "") -> Gauge: ...


__all__ = ["Counter", "Gauge", "Histogram", "Labels", "Metrics"]
