"""Config settings — Settings base class and the process-wide FaultSettings."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, ClassVar

from faultline.config.errors import InvalidSettingValueError

if TYPE_CHECKING:
    from faultline.config.loaders import SettingsLoader


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FaultSettings(Settings):
    """Tunables for stack capture.

    Environment variables (see :class:`~faultline.config.loaders.EnvSettingsLoader`):

    * ``FAULTLINE_STACK_DEPTH`` – maximum frames captured per fault.
    * ``FAULTLINE_INTERNAL_PATHS`` – comma separated path suffixes whose
      frames are hidden from rendered traces (e.g. your own fault helpers).
    """

    _prefix: ClassVar[str] = "FAULTLINE"

    stack_depth: int = 32
    internal_paths: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        if self.stack_depth < 1:
            raise InvalidSettingValueError("stack_depth", self.stack_depth, "must be at least 1")


_current = FaultSettings()


def get_settings() -> FaultSettings:
    return _current


def configure(settings: FaultSettings | None = None) -> FaultSettings:
    """Install process-wide fault settings; ``None`` restores the defaults."""
    global _current
    _current = settings if settings is not None else FaultSettings()
    return _current


def load_settings(loader: SettingsLoader | None = None) -> FaultSettings:
    """Load :class:`FaultSettings` (from the environment by default) and install them."""
    from faultline.config.loaders import EnvSettingsLoader

    return configure((loader or EnvSettingsLoader()).load(FaultSettings))


__all__ = ["FaultSettings", "Settings", "configure", "get_settings", "load_settings"]
