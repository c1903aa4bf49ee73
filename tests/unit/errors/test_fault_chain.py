"""Unit tests for cause-chain traversal and capability search."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from faultline.errors import (
    SystemFault,
    capability_find,
    find_instance,
    is_cause,
    iter_chain,
    system,
    system_wrap,
    unwrap,
)


@runtime_checkable
class Temporary(Protocol):
    def temporary(self) -> bool: ...


class TemporaryError(Exception):
    def __init__(self, message: str, retry_after: float) -> None:
        super().__init__(message)
        self.retry_after = retry_after

    def temporary(self) -> bool:
        return True


class WrappingError(Exception):
    """Foreign wrapper exposing its own ``unwrap``."""

    def __init__(self, message: str, inner: BaseException) -> None:
        super().__init__(message)
        self._inner = inner

    def unwrap(self) -> BaseException:
        return self._inner


def _retry_after(err: BaseException) -> tuple[float, bool]:
    if isinstance(err, Temporary) and err.temporary():
        return getattr(err, "retry_after", 0.0), True
    return 0.0, False


class TestUnwrap:
    def test_system_fault_unwraps_to_cause(self) -> None:
        inner = ValueError("x")
        assert unwrap(system_wrap(inner, "f")) is inner

    def test_foreign_error_unwraps_via_dunder_cause(self) -> None:
        root = KeyError("k")
        try:
            try:
                raise root
            except KeyError as exc:
                raise RuntimeError("lookup failed") from exc
        except RuntimeError as outer:
            assert unwrap(outer) is root

    def test_implicit_context_is_not_followed(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError:
                raise RuntimeError("while handling")  # noqa: B904
        except RuntimeError as outer:
            assert unwrap(outer) is None

    def test_custom_unwrap_method_is_used(self) -> None:
        inner = OSError("io")
        assert unwrap(WrappingError("w", inner)) is inner

    def test_terminal_unwraps_to_none(self) -> None:
        assert unwrap(ValueError("x")) is None


class TestIterChain:
    def test_walks_outermost_first(self) -> None:
        root = ValueError("root")
        middle = system_wrap(root, "middle")
        outer = system_wrap(middle, "outer")
        assert list(iter_chain(outer)) == [outer, middle, root]

    def test_root_system_fault_includes_terminal(self) -> None:
        fault = system("boom")
        chain = list(iter_chain(fault))
        assert chain[0] is fault
        assert str(chain[1]) == "boom"
        assert len(chain) == 2

    def test_none_yields_nothing(self) -> None:
        assert list(iter_chain(None)) == []

    def test_cycle_terminates(self) -> None:
        a = ValueError("a")
        b = ValueError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert list(iter_chain(a)) == [a, b]


class TestCapabilityFind:
    def test_finds_capability_two_wraps_down(self) -> None:
        err = system_wrap(system_wrap(TemporaryError("busy", 2.5), "f"), "i")
        value, found = capability_find(err, _retry_after)
        assert found is True
        assert value == 2.5

    def test_not_found(self) -> None:
        err = system_wrap(system_wrap(ValueError("nope"), "f"), "i")
        assert capability_find(err, _retry_after) == (None, False)

    def test_predicate_sees_node_before_unwrapping(self) -> None:
        seen: list[BaseException] = []

        def record(e: BaseException) -> tuple[None, bool]:
            seen.append(e)
            return None, False

        outer = system_wrap(ValueError("v"), "f")
        capability_find(outer, record)
        assert seen[0] is outer
        assert isinstance(seen[1], ValueError)

    def test_stops_at_first_match(self) -> None:
        calls = 0

        def match_system(e: BaseException) -> tuple[str, bool]:
            nonlocal calls
            calls += 1
            return e.__class__.__name__, isinstance(e, SystemFault)

        value, found = capability_find(system_wrap(system("c"), "f"), match_system)
        assert (value, found) == ("SystemFault", True)
        assert calls == 1

    def test_through_foreign_intermediate(self) -> None:
        err = system_wrap(WrappingError("adapter", TemporaryError("busy", 1.0)), "top")
        assert capability_find(err, _retry_after) == (1.0, True)

    def test_capability_on_system_fault_node(self) -> None:
        class RetryableFault(SystemFault):
            retry_after = 7.0

            def temporary(self) -> bool:
                return True

        err = system_wrap(RetryableFault("flaky"), "outer")
        assert capability_find(err, _retry_after) == (7.0, True)

    def test_none_error_is_not_found(self) -> None:
        assert capability_find(None, _retry_after) == (None, False)


class TestFindInstance:
    def test_finds_class(self) -> None:
        root = TimeoutError("slow")
        err = system_wrap(system_wrap(root, "f"), "i")
        assert find_instance(err, TimeoutError) is root

    def test_finds_protocol(self) -> None:
        root = TemporaryError("busy", 1.0)
        assert find_instance(system_wrap(root, "f"), Temporary) is root

    def test_missing_returns_none(self) -> None:
        assert find_instance(system("c"), KeyError) is None


class TestIsCause:
    def test_sentinel_through_many_layers(self) -> None:
        sentinel = asyncio.CancelledError()
        err: BaseException = sentinel
        for depth in range(10):
            err = system_wrap(err, f"layer {depth}")
        assert is_cause(err, sentinel)

    def test_class_target(self) -> None:
        err = system_wrap(system_wrap(asyncio.CancelledError(), "f"), "i")
        assert is_cause(err, asyncio.CancelledError)

    def test_absent_sentinel(self) -> None:
        sentinel = ValueError("sentinel")
        assert not is_cause(system_wrap(ValueError("other"), "f"), sentinel)
