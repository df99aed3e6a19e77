"""Unit tests for DevFlagsSettings and the settings loaders."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from devflags.config.settings import (
    DevFlagsSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
)
from devflags.config.validation import ConfigError, InvalidSettingValueError

_ENV_KEYS = (
    "DEVFLAGS_DEV_FLAGS",
    "DEVFLAGS_INITIAL_OVERRIDES",
    "DEVFLAGS_VISIBLE",
    "DEVFLAGS_LOG_LEVEL",
    "DEVFLAGS_JSON_LOGS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so keys written by load_dotenv are removed at teardown
    for key in _ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# DevFlagsSettings
# ---------------------------------------------------------------------------


class TestDevFlagsSettings:
    def test_defaults(self) -> None:
        settings = DevFlagsSettings()
        assert settings.dev_flags == []
        assert settings.initial_overrides == ""
        assert settings.visible is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is True

    def test_log_level_normalised(self) -> None:
        assert DevFlagsSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            DevFlagsSettings(log_level="chatty")
        assert exc_info.value.setting_name == "log_level"
        assert exc_info.value.allowed == ["DEBUG", "ERROR", "INFO", "WARNING"]
        assert exc_info.value.code == "invalid_setting_value"
        assert "allowed: DEBUG, ERROR, INFO, WARNING" in exc_info.value.message

    def test_env_key(self) -> None:
        assert DevFlagsSettings.env_key("dev_flags") == "DEVFLAGS_DEV_FLAGS"
        assert Settings.env_key("debug") == "DEBUG"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        assert EnvSettingsLoader().load(DevFlagsSettings) == DevFlagsSettings()

    def test_loads_all_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVFLAGS_DEV_FLAGS", "chat, pipelines ,")
        monkeypatch.setenv("DEVFLAGS_INITIAL_OVERRIDES", "disableHome=true")
        monkeypatch.setenv("DEVFLAGS_VISIBLE", "yes")
        monkeypatch.setenv("DEVFLAGS_LOG_LEVEL", "warning")
        monkeypatch.setenv("DEVFLAGS_JSON_LOGS", "0")
        settings = EnvSettingsLoader().load(DevFlagsSettings)
        assert settings.dev_flags == ["chat", "pipelines"]
        assert settings.initial_overrides == "disableHome=true"
        assert settings.visible is True
        assert settings.log_level == "WARNING"
        assert settings.json_logs is False

    def test_invalid_value_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVFLAGS_LOG_LEVEL", "loud")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(DevFlagsSettings)

    def test_construction_failure_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclasses.dataclass
        class StrictSettings(Settings):
            _prefix = "STRICT"
            mode: str = "a"

            def _validate(self) -> None:
                if self.mode != "a":
                    raise ValueError("mode must be a")

        monkeypatch.setenv("STRICT_MODE", "b")
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_bool_tolerates_whitespace(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVFLAGS_VISIBLE", " On ")
        assert EnvSettingsLoader().load(DevFlagsSettings).visible is True


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DEVFLAGS_DEV_FLAGS=alpha,beta\nDEVFLAGS_VISIBLE=true\n")
        settings = DotenvSettingsLoader(str(env_file)).load(DevFlagsSettings)
        assert settings.dev_flags == ["alpha", "beta"]
        assert settings.visible is True

    def test_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DEVFLAGS_LOG_LEVEL=ERROR\n")
        monkeypatch.setenv("DEVFLAGS_LOG_LEVEL", "DEBUG")
        settings = DotenvSettingsLoader(str(env_file)).load(DevFlagsSettings)
        assert settings.log_level == "DEBUG"
