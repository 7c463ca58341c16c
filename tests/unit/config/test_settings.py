"""Unit tests for config settings & validation."""

import logging

import pytest

from flagkit.application.feature_flags import DeployEnv, SettingsEnvironmentProvider
from flagkit.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FlagSettings,
    SettingsFactory,
    SettingsLoader,
)
from flagkit.config.validation import ConfigError, InvalidSettingValueError


# ---------------------------------------------------------------------------
# FlagSettings
# ---------------------------------------------------------------------------


class TestFlagSettings:
    def test_defaults(self) -> None:
        settings = FlagSettings()
        assert settings.environment is DeployEnv.LOCAL
        assert settings.override_key_prefix == "ff_"
        assert settings.query_param_prefix == "ff_"
        assert settings.level == logging.INFO

    def test_alias_env(self) -> None:
        assert FlagSettings(deploy_env="prod").environment is DeployEnv.PRODUCTION

    def test_invalid_env(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            FlagSettings(deploy_env="moon")
        assert exc_info.value.setting_name == "deploy_env"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            FlagSettings(log_level="chatty")

    def test_to_dict_uses_env_names(self) -> None:
        settings = FlagSettings(deploy_env="staging", catalog_path="/etc/flags.json")
        assert settings.to_dict() == {
            "FLAGS_DEPLOY_ENV": "staging",
            "FLAGS_CATALOG_PATH": "/etc/flags.json",
            "FLAGS_OVERRIDE_KEY_PREFIX": "ff_",
            "FLAGS_QUERY_PARAM_PREFIX": "ff_",
            "FLAGS_LOG_LEVEL": "INFO",
        }

    def test_environment_provider(self) -> None:
        provider = SettingsEnvironmentProvider(FlagSettings(deploy_env="staging"))
        assert provider.current() is DeployEnv.STAGING


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_prefixed_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DEPLOY_ENV", "staging")
        monkeypatch.setenv("FLAGS_CATALOG_PATH", "/etc/flags.json")
        settings = EnvSettingsLoader().load(FlagSettings)
        assert settings.environment is DeployEnv.STAGING
        assert settings.catalog_path == "/etc/flags.json"

    def test_invalid_value_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DEPLOY_ENV", "moon")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(FlagSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DEPLOY_ENV", "local")
        env_file = tmp_path / ".env"
        env_file.write_text("FLAGS_DEPLOY_ENV=development\n", encoding="utf-8")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(FlagSettings)
        assert settings.environment is DeployEnv.DEVELOPMENT


class TestSettingsFactory:
    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGS_DEPLOY_ENV", "staging")
        settings = SettingsFactory.create(
            FlagSettings, [EnvSettingsLoader()], overrides={"deploy_env": "production"}
        )
        assert settings.environment is DeployEnv.PRODUCTION

    def test_failing_loader_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class Broken(SettingsLoader):
            def load(self, settings_class):
                raise ConfigError("unavailable")

        monkeypatch.setenv("FLAGS_DEPLOY_ENV", "dev")
        settings = SettingsFactory.create(FlagSettings, [EnvSettingsLoader(), Broken()])
        assert settings.environment is DeployEnv.DEVELOPMENT

    def test_invalid_override_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SettingsFactory.create(FlagSettings, overrides={"deploy_env": "moon"})

    def test_unknown_field_wrapped(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(FlagSettings, overrides={"colour": "red"})
