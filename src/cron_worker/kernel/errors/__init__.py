"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── ApplicationError     (application.py)
"""

from cron_worker.kernel.errors.application import ApplicationError
from cron_worker.kernel.errors.base import BaseError
from cron_worker.kernel.errors.domain import (
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
