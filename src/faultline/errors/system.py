"""System faults — internal failures with a layered cause chain."""

from __future__ import annotations

import json
from typing import Any

from faultline.errors.formatting import safe_str, sprintf
from faultline.stack.trace import Frame, capture

PADDING = "   "


class SystemFault(Exception):
    """An error caused by an internal fault.

    Typical examples are a failed database connection, an unreadable stream
    or an unexpected response from a downstream service: errors only the
    application itself can deal with.

    Each instance is one node of a cause chain.  It stores the message added
    at this layer, the wrapped cause exactly as given, and a stack trace
    captured once, when the node is constructed.  Nodes are never mutated;
    every wrap produces a new node.

    Args:
        message: Context added at this layer.
        cause: Error being wrapped.  ``None`` creates a root fault whose
            cause is a plain terminal error carrying *message*.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self._cause: BaseException
        self._inherited: tuple[str, ...]
        if cause is None:
            self._cause = Exception(message)
            self._inherited = ()
        else:
            self._cause = cause
            # Only the outermost error is inspected; deeper SystemFaults
            # behind a foreign wrapper reach us through its str().
            if isinstance(cause, SystemFault):
                self._inherited = cause.layers
            else:
                self._inherited = (safe_str(cause),)
            if isinstance(cause, BaseException):
                self.__cause__ = cause
        trace = capture(skip=1)
        self._frames: tuple[Frame, ...] = trace.frames
        self._stack = trace.render()

    @property
    def layers(self) -> tuple[str, ...]:
        """Layer messages, root first."""
        return self._inherited + (self.message,)

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def frames(self) -> tuple[Frame, ...]:
        """Frames captured at construction, including internal ones."""
        return self._frames

    def error(self) -> str:
        """Render the layers, outermost first, one extra indent per level.

        Example::

            insert failed
               could not open connection
                  dial tcp: connection refused
        """
        return "\n".join(
            f"{PADDING * depth}{layer}" for depth, layer in enumerate(reversed(self.layers))
        )

    def stack_trace(self) -> str:
        """Return the trace captured when *this* node was constructed."""
        return self._stack

    def report(self) -> str:
        """Return :meth:`error`, a blank line, then :meth:`stack_trace`."""
        return f"{self.error()}\n{self._stack}"

    def unwrap(self) -> BaseException:
        """Return the wrapped cause unmodified."""
        return self._cause

    def __str__(self) -> str:
        return self.error()

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("+", "+v"):
            return self.stack_trace()
        if format_spec == "q":
            return json.dumps(self.error(), ensure_ascii=False)
        return self.error()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


def system(message: str) -> SystemFault:
    """Create a root :class:`SystemFault`, capturing the stack trace."""
    return SystemFault(message)


def systemf(format: str, *args: Any) -> SystemFault:  # noqa: A002
    """Create a root :class:`SystemFault` with a ``%``-formatted message."""
    return SystemFault(sprintf(format, args))


def system_wrap(cause: BaseException, message: str) -> SystemFault:
    """Wrap *cause* in a new :class:`SystemFault` that adds *message*.

    Earlier layers stay visible when the new fault is rendered; the new node
    gets its own stack trace and the cause's trace is left as it was.
    """
    return SystemFault(message, cause=cause)


def system_wrapf(cause: BaseException, format: str, *args: Any) -> SystemFault:  # noqa: A002
    """Wrap *cause* in a new :class:`SystemFault` with a ``%``-formatted message."""
    return SystemFault(sprintf(format, args), cause=cause)


__all__ = ["PADDING", "SystemFault", "system", "system_wrap", "system_wrapf", "systemf"]
