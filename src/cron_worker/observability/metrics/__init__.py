"""Observability – metrics ports."""
from cron_worker.observability.metrics.ports import Counter, Gauge, Histogram, Metrics
from cron_worker.observability.metrics.noop import NoopMetrics
from cron_worker.observability.metrics.scheduler import SchedulerMetrics

__all__ = ["Counter", "Gauge", "Histogram", "Metrics", "NoopMetrics", "SchedulerMetrics"]
