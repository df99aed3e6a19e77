"""Config – 12-factor settings and loaders."""

from devflags.config.settings import DevFlagsSettings, EnvSettingsLoader, Settings, SettingsLoader
from devflags.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DevFlagsSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
