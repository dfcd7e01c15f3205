"""Application scheduler – Schedule port and croniter-backed CronSchedule."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from croniter import CroniterBadDateError, croniter

from cron_worker.application.scheduler.errors import InvalidCronExpressionError

__all__ = ["CronSchedule", "Schedule", "parse_cron"]

_REFERENCE_INSTANT = datetime(2000, 1, 1, tzinfo=UTC)


@runtime_checkable
class Schedule(Protocol):
    """Port: answers "what is the first qualifying instant strictly after T"."""

    def next(self, after: datetime) -> datetime: ...


class CronSchedule:
    """Cron expression evaluated in an IANA timezone.

    Stateless: every call builds a fresh ``croniter`` iterator, so ``next`` may
    be called repeatedly and from several tasks at once. Naive inputs are
    taken as UTC and results are always UTC-aware.
    """

    def __init__(self, expression: str, timezone: str = "UTC") -> None:
        self._expression = expression
        self._timezone = timezone
        self._tz = ZoneInfo(timezone)

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def timezone(self) -> str:
        return self._timezone

    def next(self, after: datetime) -> datetime:
        if after.tzinfo is None:
            after = after.replace(tzinfo=UTC)
        local = after.astimezone(self._tz)
        # occurrences fall on whole seconds, so flooring keeps "strictly after" intact
        it = croniter(self._expression, local.replace(microsecond=0))
        candidate: datetime = it.get_next(datetime)
        while candidate <= local:
            candidate = it.get_next(datetime)
        return candidate.astimezone(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CronSchedule):
            return NotImplemented
        return (self._expression, self._timezone) == (other._expression, other._timezone)

    def __hash__(self) -> int:
        return hash((self._expression, self._timezone))

    def __repr__(self) -> str:
        return f"CronSchedule({self._expression!r}, timezone={self._timezone!r})"


def parse_cron(expression: str, timezone: str = "UTC") -> CronSchedule:
    """Build a :class:`CronSchedule`, raising :class:`InvalidCronExpressionError` on bad input.

    Accepts five-field expressions, six-field expressions with a trailing
    seconds field, and the ``@hourly``/``@daily``/``@weekly``/``@monthly``/
    ``@yearly`` descriptors. Expressions that are well-formed but can never
    match (``0 0 30 2 *``) are rejected here rather than on the first run.
    """
    expression = expression.strip()
    if not expression or not croniter.is_valid(expression):
        raise InvalidCronExpressionError(expression)
    try:
        schedule = CronSchedule(expression, timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidCronExpressionError(expression, f"unknown timezone {timezone!r}", cause=exc) from exc
    try:
        schedule.next(_REFERENCE_INSTANT)
    except CroniterBadDateError as exc:
        raise InvalidCronExpressionError(expression, "expression never matches", cause=exc) from exc
    return schedule
