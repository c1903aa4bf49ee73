"""User faults — coded errors meant to be shown to an end user."""

from __future__ import annotations

from typing import Any

from faultline.errors.formatting import sprintf


class UserFault(Exception):
    """An error caused by the end user, typically failed input validation.

    Holds one or more ``code -> message`` pairs.  Codes are stable,
    machine-readable slugs (``"MISSING_FIRST_NAME"``) that let a client act
    on the error programmatically; messages are for humans.

    Entries keep insertion order.  Adding a code that is already present
    replaces its message but keeps the position it was first added at.

    Example::

        fault = user("MISSING_FIRST_NAME", "Please provide your first name")
        fault.add("INVALID_EMAIL", "Please provide a valid email address")
        str(fault)
        # - Please provide your first name (MISSING_FIRST_NAME)
        # - Please provide a valid email address (INVALID_EMAIL)
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code, message)
        self._errors: dict[str, str] = {code: message}

    def add(self, code: str, message: str) -> None:
        """Append another user error."""
        self._errors[code] = message

    def addf(self, code: str, format: str, *args: Any) -> None:  # noqa: A002
        """Append another user error with a ``%``-formatted message."""
        self.add(code, sprintf(format, args))

    def _render(self, include_codes: bool) -> str:
        if not self._errors:
            return ""
        prefix = "- " if len(self._errors) > 1 else ""
        lines = []
        for code, message in self._errors.items():
            if include_codes:
                lines.append(f"{prefix}{message} ({code})")
            else:
                lines.append(f"{prefix}{message}")
        return "\n".join(lines)

    def error(self) -> str:
        """Render all errors with their codes.

        A single error renders as ``"message (code)"``; several render as a
        ``"- message (code)"`` list, one per line.
        """
        return self._render(include_codes=True)

    def friendly_error(self) -> str:
        """Same as :meth:`error` without the codes."""
        return self._render(include_codes=False)

    def errors(self) -> dict[str, str]:
        """Return a copy of the ``code -> message`` mapping."""
        return dict(self._errors)

    def error_messages(self) -> list[str]:
        return list(self._errors.values())

    def codes(self) -> list[str]:
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(errors={self._errors!r})"


def user(code: str, message: str) -> UserFault:
    """Create a new :class:`UserFault`."""
    return UserFault(code, message)


def userf(code: str, format: str, *args: Any) -> UserFault:  # noqa: A002
    """Create a new :class:`UserFault` with a ``%``-formatted message."""
    return UserFault(code, sprintf(format, args))


__all__ = ["UserFault", "user", "userf"]
