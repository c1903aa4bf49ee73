"""Printf-style message interpolation that never raises."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def safe_str(value: object) -> str:
    """Return ``str(value)``, degrading to ``repr`` when ``__str__`` fails."""
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        try:
            return repr(value)
        except Exception:  # noqa: BLE001
            return object.__repr__(value)


def _safe_repr(value: object) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return object.__repr__(value)


def sprintf(format: str, args: tuple[Any, ...]) -> str:  # noqa: A002
    """Interpolate *args* into *format* using ``%`` formatting.

    A single mapping argument feeds named fields (``"%(user)s"``).  Malformed
    specifiers, missing or surplus arguments degrade to the literal format
    text followed by the argument reprs, e.g. ``"disk %d full ['a']"``.
    """
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return format % values
    except Exception:  # noqa: BLE001
        if not args:
            return format
        return f"{format} [{', '.join(_safe_repr(a) for a in args)}]"


__all__ = ["safe_str", "sprintf"]
