"""Unit tests for the defaults provider and environment configuration."""

from __future__ import annotations

import asyncio

import pytest

from eventually.config import (
    ConfigError,
    DefaultsProvider,
    EnvSettingsLoader,
    EventuallySettings,
    InvalidSettingValueError,
    configure_defaults,
    configure_defaults_from_env,
    default_provider,
    fail_always,
    get_defaults,
    reset_defaults,
)
from eventually.policy import ErrorHandlingStrategy


async def suppress(error: Exception) -> ErrorHandlingStrategy:
    return ErrorHandlingStrategy.SUPPRESS


# ---------------------------------------------------------------------------
# DefaultsProvider
# ---------------------------------------------------------------------------


class TestDefaultsProvider:
    def test_initial_values(self) -> None:
        current = DefaultsProvider().get()
        assert current.retries == 0
        assert current.backoff == ()
        assert current.fail is fail_always
        assert current.redirect is None

    def test_default_fail_handler_yields_fail(self) -> None:
        assert asyncio.run(fail_always(RuntimeError("x"))) is ErrorHandlingStrategy.FAIL

    def test_configure_overwrites_only_given_fields(self) -> None:
        provider = DefaultsProvider()
        provider.configure(retries=3)
        provider.configure(fail=suppress)

        current = provider.get()
        assert current.retries == 3
        assert current.fail is suppress
        assert current.backoff == ()

    def test_scalar_backoff_is_normalised(self) -> None:
        provider = DefaultsProvider()
        assert provider.configure(backoff=250).backoff == (250,)

    def test_configure_without_fields_is_a_no_op(self) -> None:
        provider = DefaultsProvider()
        before = provider.get()
        assert provider.configure() is before

    def test_reset(self) -> None:
        provider = DefaultsProvider()
        provider.configure(retries=8, backoff=[1, 2])
        provider.reset()
        assert provider.get().retries == 0
        assert provider.get().backoff == ()


class TestModuleLevelDefaults:
    def test_configure_and_get(self) -> None:
        configure_defaults(retries=2, backoff=[5, 10])
        assert get_defaults().retries == 2
        assert get_defaults().backoff == (5, 10)
        assert get_defaults() is default_provider.get()

    def test_reset_defaults(self) -> None:
        configure_defaults(retries=2)
        reset_defaults()
        assert get_defaults().retries == 0


# ---------------------------------------------------------------------------
# EventuallySettings / EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEventuallySettings:
    def test_defaults(self) -> None:
        settings = EventuallySettings()
        assert settings.retries == 0
        assert settings.backoff == []

    def test_negative_retries_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as excinfo:
            EventuallySettings(retries=-1)
        assert excinfo.value.setting_name == "retries"

    def test_negative_backoff_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EventuallySettings(backoff=[10, -5])


class TestEnvSettingsLoader:
    def test_loads_int(self) -> None:
        settings = EnvSettingsLoader({"EVENTUALLY_RETRIES": "4"}).load(EventuallySettings)
        assert settings.retries == 4

    def test_loads_int_list(self) -> None:
        settings = EnvSettingsLoader({"EVENTUALLY_BACKOFF": "100, 200,,300"}).load(EventuallySettings)
        assert settings.backoff == [100, 200, 300]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(EventuallySettings)
        assert settings.retries == 0
        assert settings.backoff == []

    def test_non_integer_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as excinfo:
            EnvSettingsLoader({"EVENTUALLY_RETRIES": "lots"}).load(EventuallySettings)
        assert excinfo.value.setting_name == "EVENTUALLY_RETRIES"
        assert isinstance(excinfo.value, ConfigError)

    def test_invalid_value_carries_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as excinfo:
            EnvSettingsLoader({"EVENTUALLY_BACKOFF": "10,soon"}).load(EventuallySettings)

        payload = excinfo.value.to_dict()
        assert payload["code"] == "invalid_setting_value"
        assert payload["detail"]["setting"] == "EVENTUALLY_BACKOFF"
        assert payload["detail"]["value"] == "'10,soon'"
        assert "soon" in payload["detail"]["reason"]

    def test_present_fields(self) -> None:
        loader = EnvSettingsLoader({"EVENTUALLY_BACKOFF": "10", "OTHER_RETRIES": "1"})
        assert loader.present_fields(EventuallySettings) == frozenset({"backoff"})

    def test_no_present_fields(self) -> None:
        assert EnvSettingsLoader({}).present_fields(EventuallySettings) == frozenset()

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENTUALLY_RETRIES", "6")
        assert EnvSettingsLoader().load(EventuallySettings).retries == 6


class TestConfigureDefaultsFromEnv:
    def test_applies_to_global_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENTUALLY_RETRIES", "3")
        monkeypatch.setenv("EVENTUALLY_BACKOFF", "50,75")

        configure_defaults_from_env()

        assert get_defaults().retries == 3
        assert get_defaults().backoff == (50, 75)
        assert get_defaults().fail is fail_always

    def test_applies_to_given_provider(self) -> None:
        provider = DefaultsProvider()
        loader = EnvSettingsLoader({"EVENTUALLY_RETRIES": "1"})

        current = configure_defaults_from_env(provider, loader)

        assert current.retries == 1
        assert provider.get().retries == 1
        assert get_defaults().retries == 0

    def test_keeps_configured_fail_handler(self) -> None:
        provider = DefaultsProvider()
        provider.configure(fail=suppress)
        configure_defaults_from_env(provider, EnvSettingsLoader({}))
        assert provider.get().fail is suppress

    def test_unset_variables_keep_configured_values(self) -> None:
        provider = DefaultsProvider()
        provider.configure(retries=5, backoff=[100])

        configure_defaults_from_env(provider, EnvSettingsLoader({}))

        assert provider.get().retries == 5
        assert provider.get().backoff == (100,)

    def test_only_set_variables_are_applied(self) -> None:
        provider = DefaultsProvider()
        provider.configure(retries=5, backoff=[100])

        configure_defaults_from_env(provider, EnvSettingsLoader({"EVENTUALLY_RETRIES": "2"}))

        assert provider.get().retries == 2
        assert provider.get().backoff == (100,)

    def test_set_backoff_keeps_configured_retries(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVENTUALLY_RETRIES", raising=False)
        monkeypatch.setenv("EVENTUALLY_BACKOFF", "20")
        configure_defaults(retries=4)

        configure_defaults_from_env()

        assert get_defaults().retries == 4
        assert get_defaults().backoff == (20,)
