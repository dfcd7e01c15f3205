"""Testing generators – Hypothesis strategies for schedules and instants."""
from cron_worker.testing.generators.strategies import cron_expression_strategy, instant_strategy

__all__ = ["cron_expression_strategy", "instant_strategy"]
