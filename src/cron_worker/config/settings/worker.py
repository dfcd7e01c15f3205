"""Config settings – CronWorkerSettings."""
from __future__ import annotations

import dataclasses
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cron_worker.config.settings.base import Settings

DISPATCH_MODES = frozenset({"sequential", "concurrent"})


@dataclasses.dataclass
class CronWorkerSettings(Settings):
    """Runtime knobs for :class:`~cron_worker.application.scheduler.CronWorker`.

    ``dispatch_mode`` chooses whether a job's firings block its own loop
    (``sequential``) or run as independent tasks that may overlap
    (``concurrent``). ``max_concurrent_jobs`` bounds handler executions across
    all jobs; ``0`` leaves them unbounded.
    """

    _prefix: dataclasses.ClassVar[str] = "CRON_WORKER"

    timezone: str = "UTC"
    dispatch_mode: str = "sequential"
    max_concurrent_jobs: int = 0
    shutdown_timeout_seconds: float = 30.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            self._reject("timezone", "unknown IANA timezone", cause=exc)
        self.dispatch_mode = self.dispatch_mode.lower()
        if self.dispatch_mode not in DISPATCH_MODES:
            self._reject("dispatch_mode", f"expected one of {sorted(DISPATCH_MODES)}")
        if self.max_concurrent_jobs < 0:
            self._reject("max_concurrent_jobs", "must be >= 0")
        if self.shutdown_timeout_seconds <= 0:
            self._reject("shutdown_timeout_seconds", "must be > 0")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            self._reject("log_level", "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["CronWorkerSettings", "DISPATCH_MODES"]
