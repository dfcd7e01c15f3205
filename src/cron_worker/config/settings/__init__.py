"""Config settings – 12-factor env-based configuration."""
from cron_worker.config.settings.base import Settings
from cron_worker.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from cron_worker.config.settings.worker import CronWorkerSettings

__all__ = ["CronWorkerSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
