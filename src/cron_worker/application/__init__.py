"""Application – job scheduling use cases."""

from cron_worker.application.scheduler import (
    CronWorker,
    DispatchMode,
    Job,
    JobRunner,
    RunnerState,
)

__all__ = ["CronWorker", "DispatchMode", "Job", "JobRunner", "RunnerState"]
