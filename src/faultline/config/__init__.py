"""Config – fault settings, env loading and config errors."""

from faultline.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from faultline.config.loaders import EnvSettingsLoader, SettingsLoader
from faultline.config.settings import FaultSettings, Settings, configure, get_settings, load_settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FaultSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure",
    "get_settings",
    "load_settings",
]
