"""Kernel time – Clock port, system and frozen clocks."""
from cron_worker.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
