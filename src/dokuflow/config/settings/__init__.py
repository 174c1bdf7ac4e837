"""Config settings – 12-factor env-based configuration."""
from dokuflow.config.settings.base import DEFAULT_BASE_URL, DokuflowSettings, Settings
from dokuflow.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_BASE_URL",
    "DokuflowSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
