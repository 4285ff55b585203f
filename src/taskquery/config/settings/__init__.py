"""Config settings – 12-factor env-based configuration."""
from taskquery.config.settings.base import Settings
from taskquery.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
