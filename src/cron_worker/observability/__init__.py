"""Observability – structured logging and metrics ports."""
from cron_worker.observability.logging import JsonLoggerFactory, get_logger
from cron_worker.observability.metrics import Counter, Gauge, Histogram, Metrics, NoopMetrics

__all__ = [
    "Counter",
    "Gauge",
    "Histogram",
    "JsonLoggerFactory",
    "Metrics",
    "NoopMetrics",
    "get_logger",
]
