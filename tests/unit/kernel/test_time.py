"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime

from cron_worker.kernel.time import Clock, FrozenClock, SystemClock


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset().total_seconds() == 0  # type: ignore[union-attr]

    def test_successive_reads_do_not_go_backwards(self) -> None:
        clk = SystemClock()
        first = clk.now()
        assert clk.now() >= first


# ---------------------------------------------------------------------------
# FrozenClock
# ---------------------------------------------------------------------------


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2025, 11, 7, 14, 1, 0, tzinfo=UTC)

    def test_now_returns_fixed_time(self) -> None:
        assert FrozenClock(self._fixed()).now() == self._fixed()

    def test_naive_datetime_pinned_as_utc(self) -> None:
        clk = FrozenClock(datetime(2025, 11, 7, 14, 1))
        assert clk.now() == self._fixed()

    def test_advance_by_seconds(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(seconds=59)
        assert clk.now() == datetime(2025, 11, 7, 14, 1, 59, tzinfo=UTC)

    def test_advance_sub_second(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(milliseconds=900)
        assert clk.now().microsecond == 900_000

    def test_multiple_advances_are_cumulative(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(seconds=10)
        clk.advance(minutes=1)
        assert clk.now() == datetime(2025, 11, 7, 14, 2, 10, tzinfo=UTC)

    def test_set_jumps_to_instant(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.set(datetime(2030, 1, 1, tzinfo=UTC))
        assert clk.now() == datetime(2030, 1, 1, tzinfo=UTC)

    def test_set_naive_pinned_as_utc(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.set(datetime(2030, 1, 1, 12))
        assert clk.now().tzinfo is UTC

    def test_frozen_clock_is_clock(self) -> None:
        clk: Clock = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()

