"""Unit tests for in-memory test fakes."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cron_worker.kernel.time import FrozenClock
from cron_worker.testing import FakeClock, FakeMetricsRegistry


class TestFakeClock:
    def test_default_pin(self) -> None:
        clk = FakeClock()
        assert isinstance(clk, FrozenClock)
        assert clk.now() == datetime(2025, 11, 7, 14, 1, tzinfo=UTC)

    def test_custom_pin(self) -> None:
        fixed = datetime(2030, 1, 1, tzinfo=UTC)
        assert FakeClock(fixed).now() == fixed


class TestFakeMetricsRegistry:
    def test_same_name_returns_same_instrument(self) -> None:
        registry = FakeMetricsRegistry()
        assert registry.counter("c") is registry.counter("c")
        assert registry.histogram("h") is registry.histogram("h")
        assert registry.gauge("g") is registry.gauge("g")

    def test_counter_totals(self) -> None:
        registry = FakeMetricsRegistry()
        counter = registry.counter("executions")
        counter.add(1, {"job": "a"})
        counter.add(2, {"job": "b"})
        registry.assert_counter_total("executions", 3)
        assert counter.total_for(job="b") == 2

    def test_assert_counter_total_fails_for_unknown(self) -> None:
        with pytest.raises(AssertionError, match="never created"):
            FakeMetricsRegistry().assert_counter_total("ghost", 1)

    def test_gauge_tracks_current(self) -> None:
        gauge = FakeMetricsRegistry().gauge("active")
        gauge.inc()
        gauge.inc()
        gauge.dec()
        assert gauge.current == 1
        gauge.set(0)
        assert gauge.current == 0
