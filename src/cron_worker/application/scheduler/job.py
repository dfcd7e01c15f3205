"""Application scheduler – Job dataclass and next-run computation.

A job runs in exactly one of two modes for its whole lifetime:

* :class:`CronMode` – the next run is the next calendar occurrence of a cron
  expression, recomputed from "now" on every cycle so that drift and long
  pauses (GC, suspend, sleep) never accumulate.
* :class:`IntervalMode` – the next run is a fixed delay after the previous
  one.

The mode is derived from ``Job.interval`` at construction time; a malformed
interval raises a :class:`JobConfigurationError` and no job is created.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Awaitable, Callable

from cron_worker.application.scheduler.errors import InvalidIntervalError, MissingIntervalError
from cron_worker.application.scheduler.schedule import Schedule, parse_cron
from cron_worker.kernel.errors import ValidationError
from cron_worker.kernel.time import Clock, SystemClock
from cron_worker.observability.logging import get_logger

__all__ = [
    "FALLBACK_DELAY",
    "MIN_LEAD_TIME",
    "CronMode",
    "Handler",
    "IntervalMode",
    "Job",
    "JobMode",
    "parse_duration",
    "parse_interval",
]

MIN_LEAD_TIME = timedelta(seconds=1)
FALLBACK_DELAY = timedelta(minutes=1)

Handler = Callable[[str], "Awaitable[None] | None"]

_log = get_logger(__name__)

_UNITS = {"ms": timedelta(milliseconds=1), "s": timedelta(seconds=1), "m": timedelta(minutes=1), "h": timedelta(hours=1)}
_DURATION_RE = re.compile(r"(?:\d+(?:\.\d+)?(?:ms|s|m|h))+")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h)")
_EVERY = "@every"


@dataclass(frozen=True)
class CronMode:
    schedule: Schedule


@dataclass(frozen=True)
class IntervalMode:
    duration: timedelta


JobMode = CronMode | IntervalMode


def parse_duration(text: str) -> timedelta | None:
    """Parse a duration literal such as ``30s``, ``1h30m`` or ``500ms``.

    Returns ``None`` when *text* is not a duration literal at all.
    """
    text = text.strip()
    if not _DURATION_RE.fullmatch(text):
        return None
    total = timedelta()
    for amount, unit in _DURATION_PART_RE.findall(text):
        total += _UNITS[unit] * float(amount)
    return total


def parse_interval(interval: str, timezone: str = "UTC", *, handler_name: str = "") -> JobMode:
    """Decide the job mode for *interval*.

    ``@every <duration>`` and bare duration literals give an
    :class:`IntervalMode`; anything else is parsed as a cron expression.
    """
    text = (interval or "").strip()
    if not text:
        raise MissingIntervalError(handler_name)

    if text.startswith(_EVERY):
        literal = text[len(_EVERY):].strip()
        duration = parse_duration(literal)
        if duration is None:
            raise InvalidIntervalError(text, f"{literal!r} is not a duration")
        return _interval_mode(text, duration)

    duration = parse_duration(text)
    if duration is not None:
        return _interval_mode(text, duration)

    return CronMode(parse_cron(text, timezone))


def _interval_mode(text: str, duration: timedelta) -> IntervalMode:
    if duration <= timedelta():
        raise InvalidIntervalError(text, "duration must be positive")
    return IntervalMode(duration)


@dataclass
class Job:
    """One recurring unit of work.

    ``next_time`` caches the last computed cron target for diagnostics; it is
    never read back by the scheduling logic.
    """

    handler_name: str
    interval: str
    handler: Handler
    params: str = ""
    worker_index: int = 0
    timezone: str = "UTC"
    _mode: JobMode | None = field(default=None, init=False, repr=False)
    next_time: datetime | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.handler_name:
            raise ValidationError("Job must have a handler_name")
        self._mode = parse_interval(self.interval, self.timezone, handler_name=self.handler_name)

    @property
    def mode(self) -> JobMode | None:
        """Derived from ``interval`` on construction; read-only afterwards."""
        return self._mode

    @property
    def is_cron(self) -> bool:
        return isinstance(self.mode, CronMode)

    def calculate_next_time(self, clock: Clock | None = None) -> timedelta:
        """Return how long to wait before the next execution.

        Cron jobs never get a delay below :data:`MIN_LEAD_TIME`: when the next
        occurrence is closer than that it is skipped and the one after it is
        used instead. Interval jobs return their configured duration.
        """
        clock = clock or SystemClock()
        mode = self.mode

        if isinstance(mode, CronMode):
            now = clock.now()
            target = mode.schedule.next(now)
            delay = target - now
            if delay < MIN_LEAD_TIME:
                target = mode.schedule.next(target + MIN_LEAD_TIME)
                delay = target - clock.now()
            self.next_time = target
            return delay

        if isinstance(mode, IntervalMode):
            return mode.duration

        _log.warning(
            "job.mode_unset",
            job=self.handler_name,
            fallback_seconds=FALLBACK_DELAY.total_seconds(),
        )
        return FALLBACK_DELAY
