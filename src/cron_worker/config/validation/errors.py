"""Config validation – errors raised while reading worker settings."""
from __future__ import annotations

from cron_worker.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded; the worker must not start."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "setting_missing"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} is required", detail={"env_key": env_key})
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is rejected by ``Settings._validate``."""
    default_code = "setting_invalid"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        source = f"{setting_name} ({env_key})" if env_key else setting_name
        super().__init__(
            f"{source}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "env_key": env_key, "value": value},
            cause=cause,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
