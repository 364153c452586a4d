"""Unit tests for driver_engine.config."""

from __future__ import annotations

import logging

import pytest

from driver_engine.config import PlatformEnv, Settings, load_settings

# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_env(self):
        settings = Settings()
        assert settings.env == PlatformEnv.DEV

    def test_default_debug(self):
        settings = Settings()
        assert settings.debug is False

    def test_default_structured_logging(self):
        settings = Settings()
        assert settings.structured_logging is False

    def test_default_datasource_none(self):
        settings = Settings()
        assert settings.datasource_url is None
        assert settings.datasource_driver_class_name is None
        assert settings.datasource_xa_data_source_class_name is None
        assert settings.datasource_validation_query is None
        assert settings.is_datasource_configured() is False


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------


class TestSettingsEnvOverrides:
    def test_env_var_overrides_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DRIVERS_ENV", "prod")
        settings = Settings()
        assert settings.env == PlatformEnv.PROD

    def test_env_var_overrides_debug(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DRIVERS_DEBUG", "true")
        settings = Settings()
        assert settings.debug is True

    def test_env_var_sets_datasource_url(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DRIVERS_DATASOURCE_URL", "jdbc:h2:mem:test")
        settings = Settings()
        assert settings.datasource_url == "jdbc:h2:mem:test"
        assert settings.is_datasource_configured() is True

    def test_env_var_names_are_case_insensitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("drivers_datasource_validation_query", "SELECT 2")
        settings = Settings()
        assert settings.datasource_validation_query == "SELECT 2"

    def test_blank_env_var_is_none(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DRIVERS_DATASOURCE_DRIVER_CLASS_NAME", "   ")
        settings = Settings()
        assert settings.datasource_driver_class_name is None

    def test_invalid_env_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DRIVERS_ENV", "qa")
        with pytest.raises(ValueError):
            Settings()

    def test_dotenv_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / ".env").write_text("DRIVERS_DATASOURCE_URL=jdbc:derby:memory:db\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.datasource_url == "jdbc:derby:memory:db"


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(datasource_url="jdbc:mysql://db/app", env="staging")
        assert settings.datasource_url == "jdbc:mysql://db/app"
        assert settings.env == PlatformEnv.STAGING

    def test_debug_logs_environment(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="driver_engine.config"):
            load_settings(debug=True)
        assert "Loaded settings for environment: dev" in caplog.text

    def test_no_log_without_debug(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.INFO, logger="driver_engine.config"):
            load_settings()
        assert caplog.text == ""
