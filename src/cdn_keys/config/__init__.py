"""Config – 12-factor settings and loaders."""

from cdn_keys.config.settings import (
    EnvSettingsLoader,
    KeySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from cdn_keys.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "KeySettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
