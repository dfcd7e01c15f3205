"""Kernel – framework-agnostic building blocks (errors, clock)."""

from cron_worker.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
