"""Application scheduler – JobExecutionContext, one handler run and its outcome."""
from __future__ import annotations

import asyncio
import inspect
import time
from dataclasses import dataclass, field
from datetime import datetime

from cron_worker.application.scheduler.job import Job
from cron_worker.kernel.time import Clock, SystemClock

__all__ = ["JobExecutedEvent", "JobExecutionContext"]


@dataclass(frozen=True)
class JobExecutedEvent:
    """Outcome of one handler execution (successful or not)."""

    handler_name: str
    worker_index: int
    started_at: datetime
    duration_ms: float
    error: str | None = None
    error_type: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class JobExecutionContext:
    """Run a job handler once and capture execution details.

    Coroutine handlers are awaited on the loop; plain callables run in a
    worker thread. Any ``Exception`` raised by the handler is turned into a
    failed :class:`JobExecutedEvent` instead of propagating.
    """

    job: Job
    clock: Clock = field(default_factory=SystemClock)

    async def run(self) -> JobExecutedEvent:
        started_at = self.clock.now()
        t0 = time.monotonic()
        error: str | None = None
        error_type: str | None = None
        try:
            await self._invoke()
        except Exception as exc:  # noqa: BLE001
            error = str(exc) or type(exc).__name__
            error_type = type(exc).__name__
        duration_ms = (time.monotonic() - t0) * 1000
        return JobExecutedEvent(
            handler_name=self.job.handler_name,
            worker_index=self.job.worker_index,
            started_at=started_at,
            duration_ms=duration_ms,
            error=error,
            error_type=error_type,
        )

    async def _invoke(self) -> None:
        handler = self.job.handler
        if inspect.iscoroutinefunction(handler):
            await handler(self.job.params)
            return
        result = await asyncio.to_thread(handler, self.job.params)
        if inspect.isawaitable(result):
            await result

