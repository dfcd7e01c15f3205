"""Testing fakes – in-memory doubles for kernel and observability ports."""
from cron_worker.testing.fakes.clock import FakeClock
from cron_worker.testing.fakes.metrics import FakeMetricsRegistry

__all__ = ["FakeClock", "FakeMetricsRegistry"]
