"""Observability – structured logging helpers."""
from cron_worker.observability.logging.factory import JsonLoggerFactory
from cron_worker.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
