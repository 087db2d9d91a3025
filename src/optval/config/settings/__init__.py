"""Config settings – env-based configuration."""
from optval.config.settings.base import LoggingSettings, Settings
from optval.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
]
