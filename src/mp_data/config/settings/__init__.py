"""Config settings – 12-factor env-based configuration."""
from mp_data.config.settings.base import Settings
from mp_data.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_data.config.settings.validator import SettingsValidator

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader", "SettingsValidator"]
