"""
cron_worker – Recurring job scheduler driven by cron expressions or fixed intervals.

Import path convention::

    from cron_worker.application.scheduler import CronWorker, Job
    from cron_worker.kernel.time import FrozenClock, SystemClock
    from cron_worker.config import CronWorkerSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
