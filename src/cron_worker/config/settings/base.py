"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import NoReturn

from cron_worker.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and check their values in :meth:`_validate`,
    which runs on construction: an instance that exists has passed it.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``CronWorkerSettings.env_key("timezone")`` is ``CRON_WORKER_TIMEZONE``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        pass

    def _reject(self, field_name: str, reason: str, cause: BaseException | None = None) -> NoReturn:
        raise InvalidSettingValueError(
            field_name,
            getattr(self, field_name),
            reason,
            env_key=self.env_key(field_name),
            cause=cause,
        )


__all__ = ["Settings"]
