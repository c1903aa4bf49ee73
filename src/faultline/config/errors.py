"""Config errors — raised when fault settings are invalid or cannot be loaded."""
from __future__ import annotations

from faultline.errors.system import SystemFault


class ConfigError(SystemFault):
    """Raised when configuration is invalid or loading failed."""


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but unusable."""

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
