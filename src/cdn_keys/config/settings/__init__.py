"""Config settings – 12-factor env-based configuration."""
from cdn_keys.config.settings.base import Settings
from cdn_keys.config.settings.factory import SettingsFactory
from cdn_keys.config.settings.keys import KeySettings
from cdn_keys.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "KeySettings", "Settings", "SettingsFactory", "SettingsLoader"]
