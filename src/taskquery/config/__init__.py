"""Config – 12-factor settings for paging and sorting."""

from taskquery.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from taskquery.config.task_query import TaskQuerySettings, UnknownSortPolicy
from taskquery.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "TaskQuerySettings",
    "UnknownSortPolicy",
]
