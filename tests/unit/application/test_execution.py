"""Unit tests for JobExecutionContext and JobExecutedEvent."""
from __future__ import annotations

import asyncio
import threading
from datetime import UTC, datetime

from cron_worker.application.scheduler import Job, JobExecutedEvent, JobExecutionContext
from cron_worker.kernel.time import FrozenClock


def _job(handler, params: str = "") -> Job:
    return Job(handler_name="exec-job", interval="1m", handler=handler, params=params)


class TestJobExecutionContext:
    def test_async_handler_receives_params(self):
        async def _run():
            received: list[str] = []

            async def handler(params: str) -> None:
                received.append(params)

            event = await JobExecutionContext(job=_job(handler, params="tenant=42")).run()

            assert received == ["tenant=42"]
            assert isinstance(event, JobExecutedEvent)
            assert event.handler_name == "exec-job"
            assert event.success is True
            assert event.error is None
            assert event.duration_ms >= 0
        asyncio.run(_run())

    def test_sync_handler_runs_off_the_event_loop(self):
        async def _run():
            threads: list[int] = []

            def handler(params: str) -> None:
                threads.append(threading.get_ident())

            event = await JobExecutionContext(job=_job(handler)).run()

            assert event.success is True
            assert threads and threads[0] != threading.get_ident()
        asyncio.run(_run())

    def test_sync_callable_returning_coroutine_is_awaited(self):
        async def _run():
            called: list[str] = []

            async def inner(params: str) -> None:
                called.append(params)

            event = await JobExecutionContext(job=_job(lambda p: inner(p), params="x")).run()
            assert event.success is True
            assert called == ["x"]
        asyncio.run(_run())

    def test_exception_captured_not_raised(self):
        async def _run():
            async def handler(params: str) -> None:
                raise RuntimeError("boom")

            event = await JobExecutionContext(job=_job(handler)).run()

            assert event.success is False
            assert event.error == "boom"
            assert event.error_type == "RuntimeError"
        asyncio.run(_run())

    def test_exception_without_message_reports_type(self):
        async def _run():
            def handler(params: str) -> None:
                raise KeyError

            event = await JobExecutionContext(job=_job(handler)).run()
            assert event.error == "KeyError"
        asyncio.run(_run())

    def test_started_at_comes_from_clock(self):
        async def _run():
            fixed = datetime(2025, 11, 7, 14, 1, tzinfo=UTC)
            job = _job(lambda params: None)
            job.worker_index = 3
            event = await JobExecutionContext(job=job, clock=FrozenClock(fixed)).run()
            assert event.started_at == fixed
            assert event.worker_index == 3
        asyncio.run(_run())

    def test_duration_measured(self):
        async def _run():
            async def handler(params: str) -> None:
                await asyncio.sleep(0.01)

            event = await JobExecutionContext(job=_job(handler)).run()
            assert event.duration_ms >= 10
        asyncio.run(_run())
