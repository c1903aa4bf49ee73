"""Stack capture — caller frames recorded when a system fault is built."""

from __future__ import annotations

import dataclasses
import itertools
import os
import sys
import traceback
from collections.abc import Iterable, Iterator
from types import FrameType

# Files of the fault machinery itself; their frames never show up in a trace.
INTERNAL_FILES: tuple[str, ...] = (
    "faultline/errors/system.py",
    "faultline/stack/trace.py",
    "faultline/config/errors.py",
)


@dataclasses.dataclass(frozen=True)
class Frame:
    """One caller frame."""

    file: str
    line: int
    function: str

    def render(self) -> str:
        return f"\nat {self.file}:{self.line}\n   --> {self.function}"


@dataclasses.dataclass(frozen=True)
class Trace:
    """Ordered caller frames, innermost first."""

    frames: tuple[Frame, ...] = ()

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __len__(self) -> int:
        return len(self.frames)

    def render(self, exclude: Iterable[str] | None = None) -> str:
        """Render as ``"\\nat file:line\\n   --> function"`` blocks.

        Frames whose path ends with one of *exclude* (default:
        :func:`internal_suffixes`) are dropped.
        """
        suffixes = tuple(internal_suffixes() if exclude is None else exclude)
        return "".join(f.render() for f in self.frames if not _matches(f.file, suffixes))


def _matches(path: str, suffixes: tuple[str, ...]) -> bool:
    normalised = path.replace(os.sep, "/")
    return any(normalised == s or normalised.endswith("/" + s) for s in suffixes)


def _function_name(frame: FrameType) -> str:
    code = frame.f_code
    qualname = getattr(code, "co_qualname", code.co_name)
    module = frame.f_globals.get("__name__")
    return f"{module}.{qualname}" if module else qualname


def internal_suffixes() -> tuple[str, ...]:
    """Path suffixes hidden from rendered traces."""
    from faultline.config.settings import get_settings

    return INTERNAL_FILES + tuple(get_settings().internal_paths)


def capture(skip: int = 0, depth: int | None = None) -> Trace:
    """Capture the current call stack.

    Args:
        skip: Frames to skip above the caller of ``capture``.  ``0`` starts
            the trace at the function that called ``capture``.
        depth: Maximum number of frames kept.  Defaults to
            ``FaultSettings.stack_depth``.
    """
    if depth is None:
        from faultline.config.settings import get_settings

        depth = get_settings().stack_depth
    try:
        start = sys._getframe(skip + 1)  # noqa: SLF001
    except ValueError:
        return Trace()
    frames = tuple(
        Frame(f.f_code.co_filename, lineno, _function_name(f))
        for f, lineno in itertools.islice(traceback.walk_stack(start), max(depth, 0))
    )
    return Trace(frames)


__all__ = ["INTERNAL_FILES", "Frame", "Trace", "capture", "internal_suffixes"]
