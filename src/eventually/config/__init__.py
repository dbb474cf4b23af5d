"""Config – process-wide defaults and environment-driven configuration."""
from eventually.config.defaults import (
    DefaultsProvider,
    configure_defaults,
    default_provider,
    fail_always,
    get_defaults,
    reset_defaults,
)
from eventually.config.loaders import EnvSettingsLoader, configure_defaults_from_env
from eventually.config.settings import EventuallySettings
from eventually.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DefaultsProvider",
    "EnvSettingsLoader",
    "EventuallySettings",
    "InvalidSettingValueError",
    "configure_defaults",
    "configure_defaults_from_env",
    "default_provider",
    "fail_always",
    "get_defaults",
    "reset_defaults",
]
