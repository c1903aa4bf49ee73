"""Cause-chain traversal — unwrap, walk and capability search."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
E = TypeVar("E")


def unwrap(err: object) -> BaseException | None:
    """Step one level down the cause chain.

    Uses the value's own ``unwrap()`` when it has one, otherwise the
    explicit ``__cause__`` set by ``raise ... from``.  Implicit
    ``__context__`` is not followed.
    """
    method = getattr(err, "unwrap", None)
    if callable(method):
        return method()
    return getattr(err, "__cause__", None)


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield *err* and every cause below it, outermost first."""
    # __cause__ can be reassigned into a loop
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def capability_find(
    err: BaseException | None,
    predicate: Callable[[BaseException], tuple[T, bool]],
) -> tuple[T | None, bool]:
    """Search the cause chain with a caller-supplied predicate.

    Similar to matching on an exception type, but the match is decided by
    *predicate*, which returns ``(value, matched)``.  This lets callers look
    for arbitrary capabilities (protocols, marker attributes, converters
    that return private types) rather than a fixed class.

    The predicate sees each node before it is unwrapped; the first match is
    returned as ``(value, True)``.  ``(None, False)`` means no node matched.

    Example::

        def retry_after(e: BaseException) -> tuple[float, bool]:
            seconds = getattr(e, "retry_after", None)
            return seconds, seconds is not None

        seconds, found = capability_find(fault, retry_after)
    """
    for current in iter_chain(err):
        value, matched = predicate(current)
        if matched:
            return value, True
    return None, False


def find_instance(err: BaseException | None, kind: type[E]) -> E | None:
    """Return the first node in the chain that is an instance of *kind*."""
    value, found = capability_find(err, lambda e: (e, isinstance(e, kind)))
    return value if found else None  # type: ignore[return-value]


def is_cause(err: BaseException | None, target: Any) -> bool:
    """Return whether *target* occurs anywhere in the chain.

    A class matches any instance of it; anything else matches by identity
    or equality (sentinel errors).
    """
    if isinstance(target, type):
        return find_instance(err, target) is not None
    _, found = capability_find(err, lambda e: (e, e is target or e == target))
    return found


__all__ = ["capability_find", "find_instance", "is_cause", "iter_chain", "unwrap"]
