"""Kernel errors – rejected job definitions and registry lookups."""

from __future__ import annotations

from cron_worker.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """A definition was rejected before anything got scheduled."""

    default_code = "validation_error"


class NotFoundError(DomainError):
    default_code = "not_found"


class ConflictError(DomainError):
    """A name is already taken in the registry."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
