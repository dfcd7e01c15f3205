"""Kernel time – the Clock port next-run computations read "now" from."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Current instant, UTC-aware."""
        ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that only moves when told to.

    Lets tests place "now" a fraction of a second before a cron occurrence
    and check which occurrence the lead-time rule picks.
    """

    def __init__(self, fixed: datetime) -> None:
        self.set(fixed)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Move forward by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)

    def set(self, fixed: datetime) -> None:
        """Jump to *fixed*; naive values are taken as UTC."""
        if fixed.tzinfo is None:
            fixed = fixed.replace(tzinfo=UTC)
        self._fixed = fixed


__all__ = ["Clock", "FrozenClock", "SystemClock"]
