"""Per-test state visible to a running test body.

Each test gets a fresh TestContext. The runner activates it on whichever
thread executes the body, so a worker abandoned after a timeout keeps writing
to a context nobody reads any more.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Iterator

from unitlite.assertions.rendering import get_string_repr


@dataclass
class TestContext:
    __test__ = False

    name: str
    expect_to_fail: bool = False
    calls: list[str] = field(default_factory=list)


_active: ContextVar[TestContext | None] = ContextVar("unitlite_test", default=None)


@contextmanager
def activate(context: TestContext) -> Iterator[TestContext]:
    token = _active.set(context)
    try:
        yield context
    finally:
        _active.reset(token)


def current_context() -> TestContext | None:
    return _active.get()


def _require_context() -> TestContext:
    context = _active.get()
    if context is None:
        raise RuntimeError("not called from inside a running unit test")
    return context


def expected_to_fail() -> None:
    """Reverse the expectation for the current test.

    A test that then fails or halts with an error is counted as a success; a
    test that completes normally is counted as a failure. Must be called before
    any assertions.
    """
    _require_context().expect_to_fail = True


def log_call(function_name: str, *args: Any) -> None:
    """Record a call in the current test's call log, for use in stubs."""
    entry = "\t".join([function_name, *(get_string_repr(a) for a in args)])
    _require_context().calls.append(entry)


def call_log() -> list[str]:
    """Calls logged so far in the current test, oldest first."""
    return list(_require_context().calls)


def clear_call_log() -> None:
    _require_context().calls.clear()
