"""Unit tests for TaskQuerySettings and EnvSettingsLoader."""
from __future__ import annotations

import pytest

from taskquery.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    TaskQuerySettings,
    UnknownSortPolicy,
)


class TestTaskQuerySettings:
    def test_defaults(self):
        settings = TaskQuerySettings()
        assert (settings.default_sort, settings.default_order) == ("id", "asc")
        assert settings.default_page_size == 10
        assert settings.max_page_size == 0
        assert settings.sort_policy is UnknownSortPolicy.REJECT

    def test_policy_case_insensitive(self):
        assert TaskQuerySettings(unknown_sort_policy="FALLBACK").sort_policy is UnknownSortPolicy.FALLBACK

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_order": "sideways"},
            {"default_page_size": -1},
            {"max_page_size": -10},
            {"unknown_sort_policy": "ignore"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidSettingValueError):
            TaskQuerySettings(**kwargs)

    def test_invalid_setting_is_config_error(self):
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_invalid_setting_detail(self):
        with pytest.raises(InvalidSettingValueError) as exc_info:
            TaskQuerySettings(default_page_size=-5)
        err = exc_info.value
        assert err.code == "invalid_setting_value"
        assert err.detail["setting"] == "default_page_size"
        assert err.detail["value"] == -5


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self):
        loader = EnvSettingsLoader(
            {
                "TASKQUERY_DEFAULT_SORT": "createTime",
                "TASKQUERY_DEFAULT_ORDER": "desc",
                "TASKQUERY_DEFAULT_PAGE_SIZE": "25",
                "TASKQUERY_MAX_PAGE_SIZE": "100",
                "TASKQUERY_UNKNOWN_SORT_POLICY": "fallback",
                "OTHER_DEFAULT_SORT": "name",
            }
        )
        settings = loader.load(TaskQuerySettings)
        assert settings.default_sort == "createTime"
        assert settings.default_order == "desc"
        assert settings.default_page_size == 25
        assert settings.max_page_size == 100
        assert settings.sort_policy is UnknownSortPolicy.FALLBACK

    def test_missing_variables_keep_defaults(self):
        assert EnvSettingsLoader({}).load(TaskQuerySettings) == TaskQuerySettings()

    def test_non_integer(self):
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"TASKQUERY_DEFAULT_PAGE_SIZE": "many"}).load(TaskQuerySettings)

    def test_validation_runs_after_load(self):
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"TASKQUERY_DEFAULT_ORDER": "up"}).load(TaskQuerySettings)

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TASKQUERY_DEFAULT_PAGE_SIZE", "7")
        assert EnvSettingsLoader().load(TaskQuerySettings).default_page_size == 7

    def test_required_setting_missing(self):
        import dataclasses

        @dataclasses.dataclass
        class RequiredSettings:
            _prefix = "APP"
            url: str

        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)  # type: ignore[type-var]
        assert exc_info.value.setting_name == "APP_URL"
