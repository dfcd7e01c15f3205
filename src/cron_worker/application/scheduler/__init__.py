"""Application scheduler – cron/interval jobs, per-job runners and the worker."""
from cron_worker.application.scheduler.errors import (
    DuplicateJobError,
    InvalidCronExpressionError,
    InvalidIntervalError,
    JobConfigurationError,
    JobNotFoundError,
    MissingIntervalError,
    RunnerStateError,
)
from cron_worker.application.scheduler.schedule import CronSchedule, Schedule, parse_cron
from cron_worker.application.scheduler.job import (
    FALLBACK_DELAY,
    MIN_LEAD_TIME,
    CronMode,
    IntervalMode,
    Job,
    JobMode,
    parse_duration,
    parse_interval,
)
from cron_worker.application.scheduler.scheduler import (
    JobExecutedEvent,
    JobExecutionContext,
)
from cron_worker.application.scheduler.runner import DispatchMode, JobRunner, RunnerState
from cron_worker.application.scheduler.worker import CronWorker

__all__ = [
    "FALLBACK_DELAY",
    "MIN_LEAD_TIME",
    "CronMode",
    "CronSchedule",
    "CronWorker",
    "DispatchMode",
    "DuplicateJobError",
    "IntervalMode",
    "InvalidCronExpressionError",
    "InvalidIntervalError",
    "Job",
    "JobConfigurationError",
    "JobExecutedEvent",
    "JobExecutionContext",
    "JobMode",
    "JobNotFoundError",
    "JobRunner",
    "MissingIntervalError",
    "RunnerState",
    "RunnerStateError",
    "Schedule",
    "parse_cron",
    "parse_duration",
    "parse_interval",
]
