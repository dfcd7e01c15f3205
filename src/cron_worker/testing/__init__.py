"""Testing support – fakes for the clock and metrics ports.

Hypothesis strategies live in :mod:`cron_worker.testing.generators` and
require the ``hypothesis`` package (``pip install "cron-worker[test]"``).
"""

from cron_worker.testing.fakes import FakeClock, FakeMetricsRegistry

__all__ = ["FakeClock", "FakeMetricsRegistry"]
