"""Kernel errors – lifecycle misuse of runners and workers."""

from __future__ import annotations

from cron_worker.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised when a lifecycle or configuration step cannot proceed."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
