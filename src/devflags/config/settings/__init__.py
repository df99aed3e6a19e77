"""Config settings – 12-factor env-based configuration."""
from devflags.config.settings.base import Settings
from devflags.config.settings.devflags import DevFlagsSettings
from devflags.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DevFlagsSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
