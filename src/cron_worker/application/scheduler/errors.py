"""Application scheduler – error types."""
from __future__ import annotations

from typing import Any

from cron_worker.kernel.errors import ApplicationError, ConflictError, NotFoundError, ValidationError


class JobConfigurationError(ValidationError):
    """A job definition cannot be turned into a schedule; the job is never started."""

    default_code = "job_configuration_error"


class InvalidCronExpressionError(JobConfigurationError):
    default_code = "invalid_cron_expression"

    def __init__(self, expression: str, reason: str | None = None, **kwargs: Any) -> None:
        msg = f"Invalid cron expression {expression!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, detail={"expression": expression}, **kwargs)
        self.expression = expression


class InvalidIntervalError(JobConfigurationError):
    default_code = "invalid_interval"

    def __init__(self, interval: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid interval {interval!r}: {reason}", detail={"interval": interval}, **kwargs)
        self.interval = interval


class MissingIntervalError(JobConfigurationError):
    default_code = "missing_interval"

    def __init__(self, handler_name: str) -> None:
        super().__init__(
            f"Job '{handler_name}' must define a cron expression or an interval",
            detail={"handler_name": handler_name},
        )
        self.handler_name = handler_name


class JobNotFoundError(NotFoundError):
    default_code = "job_not_found"

    def __init__(self, handler_name: str) -> None:
        super().__init__(f"Job '{handler_name}' is not registered", detail={"handler_name": handler_name})
        self.handler_name = handler_name


class DuplicateJobError(ConflictError):
    default_code = "duplicate_job"

    def __init__(self, handler_name: str) -> None:
        super().__init__(f"Job '{handler_name}' is already registered", detail={"handler_name": handler_name})
        self.handler_name = handler_name


class RunnerStateError(ApplicationError):
    """Lifecycle call not allowed in the runner's current state."""

    default_code = "runner_state_error"


__all__ = [
    "DuplicateJobError",
    "InvalidCronExpressionError",
    "InvalidIntervalError",
    "JobConfigurationError",
    "JobNotFoundError",
    "MissingIntervalError",
    "RunnerStateError",
]
