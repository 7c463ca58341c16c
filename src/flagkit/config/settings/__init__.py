"""Config settings – 12-factor env-based configuration."""
from flagkit.config.settings.base import Settings
from flagkit.config.settings.factory import SettingsFactory
from flagkit.config.settings.flags import FlagSettings
from flagkit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
