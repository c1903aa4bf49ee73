"""Config loaders — SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from faultline.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from faultline.config.settings import Settings

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables named ``{PREFIX}_{FIELD}``.

    Failures are raised as :class:`ConfigError` wrapping the underlying
    problem, so the rendered error shows both what was being loaded and why
    it failed.
    """

    def __init__(self, environ: typing.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = settings_class._prefix.upper()  # noqa: SLF001
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}
        try:
            for field in dataclasses.fields(settings_class):
                env_key = f"{prefix}_{field.name}".upper().lstrip("_")
                raw = environ.get(env_key)
                if raw is None:
                    if (
                        field.default is dataclasses.MISSING
                        and field.default_factory is dataclasses.MISSING
                    ):
                        raise MissingRequiredSettingError(env_key)
                    continue
                kwargs[field.name] = self._coerce(env_key, raw, hints.get(field.name, field.type))
            settings = settings_class(**kwargs)
        except Exception as exc:
            raise ConfigError(f"failed to load {settings_class.__name__}", cause=exc) from exc
        return settings

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = typing.get_origin(type_hint)
        if type_hint is bool:
            return value.strip().lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint is float:
            try:
                return type_hint(value)
            except ValueError as exc:
                raise InvalidSettingValueError(key, value, f"expected {type_hint.__name__}") from exc
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
