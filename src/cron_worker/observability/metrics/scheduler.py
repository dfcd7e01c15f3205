"""Observability – instruments recorded by job runners and the worker."""
from __future__ import annotations

from typing import TYPE_CHECKING

from cron_worker.observability.metrics.ports import Metrics

if TYPE_CHECKING:
    from cron_worker.application.scheduler.scheduler import JobExecutedEvent

EXECUTIONS = "cron_worker.job.executions"
FAILURES = "cron_worker.job.failures"
DURATION = "cron_worker.job.duration"
ACTIVE_JOBS = "cron_worker.jobs.active"


class SchedulerMetrics:
    """Bundle of the scheduler's instruments, created once per worker."""

    def __init__(self, metrics: Metrics) -> None:
        self.executions = metrics.counter(EXECUTIONS, "Handler executions")
        self.failures = metrics.counter(FAILURES, "Handler executions that raised")
        self.duration = metrics.histogram(DURATION, "Handler execution time", unit="ms")
        self.active_jobs = metrics.gauge(ACTIVE_JOBS, "Jobs with a running scheduling loop")

    def observe(self, event: JobExecutedEvent) -> None:
        labels = {"job": event.handler_name}
        self.executions.add(1, labels)
        if not event.success:
            self.failures.add(1, labels)
        self.duration.record(event.duration_ms, labels)


__all__ = ["ACTIVE_JOBS", "DURATION", "EXECUTIONS", "FAILURES", "SchedulerMetrics"]
