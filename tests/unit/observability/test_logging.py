"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from cron_worker.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            log = get_logger("cron_worker.test", job="report", worker_index=2)
            log.info("job.fired", duration_ms=1.5)
        assert logs == [
            {
                "event": "job.fired",
                "log_level": "info",
                "job": "report",
                "worker_index": 2,
                "duration_ms": 1.5,
            }
        ]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger(__name__).warning("job.mode_unset")
        assert logs[0]["log_level"] == "warning"


@pytest.mark.usefixtures("_restore_logging")
class TestJsonLoggerFactory:
    def test_renders_json_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("cron_worker.test", job="report").info("job.fired", duration_ms=3)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "job.fired"
        assert payload["job"] == "report"
        assert payload["level"] == "info"
        assert payload["logger"] == "cron_worker.test"
        assert "timestamp" in payload

    def test_level_filters_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        get_logger("cron_worker.test").info("job.scheduled")
        assert capsys.readouterr().err == ""

    def test_worker_applies_configured_level(self) -> None:
        from cron_worker.application.scheduler import CronWorker
        from cron_worker.config import CronWorkerSettings

        CronWorker(CronWorkerSettings(log_level="error")).configure_logging()
        assert logging.getLogger().level == logging.ERROR
