"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from cron_worker.kernel.time import FrozenClock


def FakeClock(fixed: datetime | None = None) -> FrozenClock:
    """Return a ``FrozenClock`` pinned to *fixed* (default 2025-11-07 14:01 UTC)."""
    return FrozenClock(fixed or datetime(2025, 11, 7, 14, 1, tzinfo=UTC))


__all__ = ["FakeClock"]
