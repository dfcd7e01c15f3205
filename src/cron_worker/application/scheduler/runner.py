"""Application scheduler – JobRunner, the per-job scheduling loop.

State machine::

    IDLE ──start()──▶ WAITING ──timer──▶ FIRING ──▶ WAITING ──▶ ... ──stop()──▶ STOPPED

Each runner owns one asyncio task and the :class:`Job` it drives. On every
cycle it asks the job for its next delay, waits for that delay or the stop
signal (whichever comes first), fires the handler and loops. A firing that is
in progress when ``stop()`` is called is allowed to finish. An error raised by
the loop itself rather than by the handler is logged as ``runner.crashed`` and
leaves the runner STOPPED.
"""
from __future__ import annotations

import asyncio
import contextlib
import enum
from datetime import timedelta

from cron_worker.application.scheduler.errors import RunnerStateError
from cron_worker.application.scheduler.job import Job
from cron_worker.application.scheduler.scheduler import JobExecutedEvent, JobExecutionContext
from cron_worker.kernel.time import Clock, SystemClock
from cron_worker.observability.logging import get_logger
from cron_worker.observability.metrics import NoopMetrics, SchedulerMetrics

__all__ = ["DispatchMode", "JobRunner", "RunnerState"]


class DispatchMode(str, enum.Enum):
    """How a firing relates to the job's own loop.

    ``SEQUENTIAL`` awaits the handler before re-arming, so firings of one job
    never overlap. ``CONCURRENT`` re-arms immediately and lets a slow handler
    overlap with the next firing.
    """

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"


class RunnerState(str, enum.Enum):
    IDLE = "idle"
    WAITING = "waiting"
    FIRING = "firing"
    STOPPED = "stopped"


class JobRunner:
    """Drive one :class:`Job` until stopped."""

    def __init__(
        self,
        job: Job,
        *,
        clock: Clock | None = None,
        metrics: SchedulerMetrics | None = None,
        dispatch_mode: DispatchMode | str = DispatchMode.SEQUENTIAL,
        limiter: asyncio.Semaphore | None = None,
    ) -> None:
        self._job = job
        self._clock = clock or SystemClock()
        self._metrics = metrics or SchedulerMetrics(NoopMetrics())
        self._dispatch_mode = DispatchMode(dispatch_mode)
        self._limiter = limiter
        self._state = RunnerState.IDLE
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task[None] | None = None
        self._shutdown: asyncio.Future[None] | None = None
        self._inflight: set[asyncio.Task[JobExecutedEvent]] = set()
        self._firings = 0
        self.last_delay: timedelta | None = None
        self.last_event: JobExecutedEvent | None = None
        self._log = get_logger(__name__, job=job.handler_name, worker_index=job.worker_index)

    @property
    def job(self) -> Job:
        return self._job

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def firings(self) -> int:
        """Number of completed handler executions."""
        return self._firings

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Spawn the scheduling task on the running event loop. No-op if already started."""
        if self._state is RunnerState.STOPPED or self._stop_event.is_set():
            raise RunnerStateError(
                f"Runner for job '{self._job.handler_name}' was stopped and cannot be restarted",
                detail={"handler_name": self._job.handler_name},
            )
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name=f"cron-job:{self._job.handler_name}"
        )
        self._log.info("runner.started", interval=self._job.interval, mode=type(self._job.mode).__name__)

    async def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to end and wait for it, including any in-flight firing.

        Idempotent and safe in every state. Concurrent callers all wait for
        the same shutdown. If *timeout* elapses the remaining work is
        cancelled.
        """
        self._stop_event.set()
        current = asyncio.current_task()
        if current is not None and (current is self._task or current in self._inflight):
            # called from inside a handler; the loop exits once the firing returns
            return
        if self._shutdown is None:
            self._shutdown = asyncio.ensure_future(self._close(timeout))
        await asyncio.shield(self._shutdown)

    async def _close(self, timeout: float | None) -> None:
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        task = self._task
        if task is not None and not task.done():
            await self._drain({task}, deadline)
        if self._inflight:
            await self._drain(set(self._inflight), deadline)
        self._state = RunnerState.STOPPED
        self._log.info("runner.stopped", firings=self._firings)

    async def _drain(self, tasks: set[asyncio.Task], deadline: float | None) -> None:
        remaining = None
        if deadline is not None:
            remaining = max(0.0, deadline - asyncio.get_running_loop().time())
        _, pending = await asyncio.wait(tasks, timeout=remaining)
        if pending:
            await self._cancel(pending)

    async def _cancel(self, tasks: set[asyncio.Task]) -> None:
        self._log.warning("runner.stop_timeout", pending=len(tasks))
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        try:
            while not self._stop_event.is_set():
                delay = self._job.calculate_next_time(self._clock)
                self.last_delay = delay
                self._state = RunnerState.WAITING
                self._log.debug(
                    "job.scheduled",
                    delay_seconds=delay.total_seconds(),
                    next_time=self._job.next_time.isoformat() if self._job.next_time else None,
                )
                if not await self._wait(delay):
                    break
                self._state = RunnerState.FIRING
                if self._dispatch_mode is DispatchMode.SEQUENTIAL:
                    await self._fire()
                else:
                    firing = asyncio.create_task(self._fire(), name=f"cron-fire:{self._job.handler_name}")
                    self._inflight.add(firing)
                    firing.add_done_callback(self._firing_done)
        except Exception:
            self._log.exception("runner.crashed", state=self._state.value)
        finally:
            self._state = RunnerState.STOPPED

    def _firing_done(self, task: asyncio.Task[JobExecutedEvent]) -> None:
        self._inflight.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self._log.error("runner.firing_crashed", exc_info=task.exception())

    async def _wait(self, delay: timedelta) -> bool:
        """Return ``True`` when the timer elapsed, ``False`` when stop was requested."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=delay.total_seconds())
        except (asyncio.TimeoutError, TimeoutError):
            return True
        return False

    async def _fire(self) -> JobExecutedEvent:
        ctx = JobExecutionContext(job=self._job, clock=self._clock)
        if self._limiter is not None:
            async with self._limiter:
                event = await ctx.run()
        else:
            event = await ctx.run()
        self._firings += 1
        self.last_event = event
        self._metrics.observe(event)
        if event.success:
            self._log.info("job.fired", duration_ms=round(event.duration_ms, 2))
        else:
            self._log.error(
                "job.failed",
                duration_ms=round(event.duration_ms, 2),
                error=event.error,
                error_type=event.error_type,
            )
        return event
