"""Application scheduler – CronWorker, the registry that owns one runner per job."""
from __future__ import annotations

import asyncio
from datetime import datetime

from cron_worker.application.scheduler.errors import (
    DuplicateJobError,
    JobConfigurationError,
    JobNotFoundError,
)
from cron_worker.application.scheduler.job import Handler, Job
from cron_worker.application.scheduler.runner import DispatchMode, JobRunner
from cron_worker.application.scheduler.scheduler import JobExecutedEvent, JobExecutionContext
from cron_worker.config.settings import CronWorkerSettings, EnvSettingsLoader, SettingsLoader
from cron_worker.kernel.time import Clock, SystemClock
from cron_worker.observability.logging import JsonLoggerFactory, get_logger
from cron_worker.observability.metrics import Metrics, NoopMetrics, SchedulerMetrics

__all__ = ["CronWorker"]


class CronWorker:
    """Run a set of cron/interval jobs, one independent task per job.

    Usage::

        worker = CronWorker.from_env()
        worker.register("daily-report", "0 12 * * *", send_report)
        worker.register("heartbeat", "30s", ping, params="primary")
        await worker.serve()   # until ``await worker.stop()``
    """

    def __init__(
        self,
        settings: CronWorkerSettings | None = None,
        *,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self._settings = settings or CronWorkerSettings()
        self._clock = clock or SystemClock()
        self._metrics = SchedulerMetrics(metrics or NoopMetrics())
        self._jobs: dict[str, Job] = {}
        self._runners: dict[str, JobRunner] = {}
        self._limiter: asyncio.Semaphore | None = None
        self._running = False
        self._stopped = asyncio.Event()
        self._next_index = 0
        self._log = get_logger(__name__)

    @classmethod
    def from_env(
        cls,
        loader: SettingsLoader | None = None,
        *,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> CronWorker:
        settings = (loader or EnvSettingsLoader()).load(CronWorkerSettings)
        return cls(settings, clock=clock, metrics=metrics)

    @property
    def settings(self) -> CronWorkerSettings:
        return self._settings

    @property
    def is_running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register(self, handler_name: str, interval: str, handler: Handler, params: str = "") -> Job:
        """Build a :class:`Job` in the worker's timezone and add it.

        Raises :class:`JobConfigurationError` when *interval* is malformed;
        nothing is registered in that case.
        """
        try:
            job = Job(
                handler_name=handler_name,
                interval=interval,
                handler=handler,
                params=params,
                timezone=self._settings.timezone,
            )
        except JobConfigurationError as exc:
            self._log.error("job.rejected", job=handler_name, interval=interval, **exc.to_dict())
            raise
        self.add_job(job)
        return job

    def add_job(self, job: Job) -> None:
        if job.handler_name in self._jobs:
            raise DuplicateJobError(job.handler_name)
        job.worker_index = self._next_index
        self._next_index += 1
        self._jobs[job.handler_name] = job
        self._log.info(
            "job.registered",
            job=job.handler_name,
            interval=job.interval,
            mode=type(job.mode).__name__,
            worker_index=job.worker_index,
        )
        if self._running:
            self._start_runner(job)

    async def remove_job(self, handler_name: str) -> None:
        """Unregister *handler_name*, stopping its loop. Unknown names are ignored."""
        if self._jobs.pop(handler_name, None) is None:
            return
        runner = self._runners.pop(handler_name, None)
        if runner is not None:
            await runner.stop(timeout=self._settings.shutdown_timeout_seconds)
            self._metrics.active_jobs.dec()

    def get_job(self, handler_name: str) -> Job:
        try:
            return self._jobs[handler_name]
        except KeyError:
            raise JobNotFoundError(handler_name) from None

    def get_runner(self, handler_name: str) -> JobRunner:
        try:
            return self._runners[handler_name]
        except KeyError:
            raise JobNotFoundError(handler_name) from None

    def list_jobs(self) -> list[Job]:
        return list(self._jobs.values())

    def next_runs(self) -> dict[str, datetime | None]:
        """Last computed cron target per job; ``None`` for interval jobs."""
        return {name: job.next_time for name, job in self._jobs.items()}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        if self._running:
            return
        if self._settings.max_concurrent_jobs:
            self._limiter = asyncio.Semaphore(self._settings.max_concurrent_jobs)
        self._running = True
        self._stopped.clear()
        for job in self._jobs.values():
            self._start_runner(job)
        self._log.info(
            "worker.started",
            jobs=len(self._jobs),
            dispatch_mode=self._settings.dispatch_mode,
            timezone=self._settings.timezone,
        )

    async def stop(self) -> None:
        """Stop every runner, letting in-flight handlers finish within the shutdown timeout."""
        if not self._running:
            return
        self._running = False
        runners = list(self._runners.values())
        self._runners.clear()
        await asyncio.gather(
            *(runner.stop(timeout=self._settings.shutdown_timeout_seconds) for runner in runners)
        )
        self._metrics.active_jobs.set(0)
        self._stopped.set()
        self._log.info("worker.stopped", jobs=len(runners))

    def configure_logging(self) -> None:
        """Route structlog output as JSON at the configured ``log_level``."""
        JsonLoggerFactory.configure(level=self._settings.log_level_number)

    async def serve(self) -> None:
        """Start the worker and block until :meth:`stop` is called."""
        await self.start()
        await self._stopped.wait()

    async def trigger(self, handler_name: str) -> JobExecutedEvent:
        """Run *handler_name* once, outside its schedule."""
        job = self.get_job(handler_name)
        event = await JobExecutionContext(job=job, clock=self._clock).run()
        self._metrics.observe(event)
        self._log.info("job.triggered", job=handler_name, success=event.success, error=event.error)
        return event

    def _start_runner(self, job: Job) -> None:
        runner = JobRunner(
            job,
            clock=self._clock,
            metrics=self._metrics,
            dispatch_mode=DispatchMode(self._settings.dispatch_mode),
            limiter=self._limiter,
        )
        self._runners[job.handler_name] = runner
        runner.start()
        self._metrics.active_jobs.inc()
