"""Kernel errors – BaseError, root of everything the worker raises."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the cron_worker error hierarchy.

    ``code`` is a stable slug to filter log lines on. ``detail`` holds the
    values that caused the failure (a cron expression, a handler name, a
    setting) so a ``job.rejected`` entry can be acted on without parsing
    ``message``.
    """

    default_code: str = "cron_worker_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
