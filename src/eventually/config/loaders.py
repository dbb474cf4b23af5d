"""Config settings – EnvSettingsLoader and environment-driven defaults."""
from __future__ import annotations

import dataclasses
import logging
import os
import typing
from typing import Any, Mapping, TypeVar

from eventually.config.defaults import DefaultsProvider, default_provider
from eventually.config.settings import EventuallySettings
from eventually.config.validation import ConfigError, InvalidSettingValueError
from eventually.policy.options import EventuallyOptions

T = TypeVar("T")
logger = logging.getLogger(__name__)


class EnvSettingsLoader:
    """Load a settings dataclass from environment variables.

    Each field ``name`` is read from ``<PREFIX>_<NAME>``; absent variables
    keep the field's default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def _environ_map(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    @staticmethod
    def _env_key(settings_class: type, name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "").upper()
        return f"{prefix}_{name}".upper().lstrip("_")

    def present_fields(self, settings_class: type) -> frozenset[str]:
        """Names of the fields whose environment variable is set."""
        environ = self._environ_map()
        return frozenset(
            field.name
            for field in dataclasses.fields(settings_class)
            if self._env_key(settings_class, field.name) in environ
        )

    def load(self, settings_class: type[T]) -> T:
        environ = self._environ_map()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = self._env_key(settings_class, field.name)
            raw = environ.get(env_key)
            if raw is None:
                continue
            try:
                kwargs[field.name] = self._coerce(raw, hints[field.name])
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        origin = typing.get_origin(type_hint)
        if type_hint is int:
            return int(value)
        if origin is list:
            (item_type,) = typing.get_args(type_hint) or (str,)
            return [item_type(v.strip()) for v in value.split(",") if v.strip()]
        return value


def configure_defaults_from_env(
    provider: DefaultsProvider | None = None,
    loader: EnvSettingsLoader | None = None,
) -> EventuallyOptions:
    """Apply ``EVENTUALLY_*`` environment settings to *provider*.

    Only variables that are actually set are applied; every other default,
    including one set earlier with :func:`configure_defaults`, is kept.
    """
    provider = provider or default_provider
    loader = loader or EnvSettingsLoader()
    settings = loader.load(EventuallySettings)
    changes = {
        name: getattr(settings, name)
        for name in loader.present_fields(EventuallySettings)
    }
    logger.debug("defaults from env %r", changes)
    return provider.configure(**changes)


__all__ = ["EnvSettingsLoader", "configure_defaults_from_env"]
