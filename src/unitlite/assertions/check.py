"""Entry point from test bodies into the assertion engine."""

from __future__ import annotations

import inspect
import linecache
import os
from types import FrameType
from typing import Any

from unitlite.assertions.base import AssertionResult, Matcher
from unitlite.assertions.matchers import (
    is_equal_to,
    is_not_equal_to,
    is_not_null,
    is_null,
)
from unitlite.context import current_context
from unitlite.errors import AssertionFailure

_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


def _caller() -> FrameType | None:
    frame = inspect.currentframe()
    while frame is not None and os.path.normcase(
        os.path.abspath(frame.f_code.co_filename)
    ) == _THIS_FILE:
        frame = frame.f_back
    return frame


def _location(frame: FrameType | None) -> str:
    if frame is None:
        return "<unknown>"
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def _source_line(frame: FrameType | None, fallback: str) -> str:
    if frame is None:
        return fallback
    line = linecache.getline(frame.f_code.co_filename, frame.f_lineno).strip()
    return line or fallback


def check_test(
    result: AssertionResult, description: str, location: str | None = None
) -> None:
    """Do nothing if ``result`` matched, otherwise raise AssertionFailure.

    The failure carries ``description``, the result's fail explanation and the
    location (the caller's ``file:line`` when not given).
    """
    if result.matched:
        return
    if location is None:
        location = _location(_caller())
    context = current_context()
    raise AssertionFailure(
        description,
        result.fail_explanation,
        location,
        expected_to_fail=context is not None and context.expect_to_fail,
    )


def _check(result: AssertionResult, description: str | None, fallback: str) -> None:
    if result.matched:
        return
    frame = _caller()
    if description is None:
        description = _source_line(frame, fallback)
    check_test(result, description, _location(frame))


def assert_that(subject: Any, matcher: Matcher, description: str | None = None) -> None:
    _check(matcher.eval(subject), description, "assert_that")


def assert_true(condition: Any, description: str | None = None) -> None:
    _check(AssertionResult(bool(condition)), description, "assert_true")


def assert_false(condition: Any, description: str | None = None) -> None:
    _check(AssertionResult(not condition), description, "assert_false")


def assert_equal(observed: Any, expected: Any, description: str | None = None) -> None:
    _check(is_equal_to(expected).eval(observed), description, "assert_equal")


def assert_not_equal(
    observed: Any, expected: Any, description: str | None = None
) -> None:
    _check(is_not_equal_to(expected).eval(observed), description, "assert_not_equal")


def assert_null(value: Any, description: str | None = None) -> None:
    _check(is_null().eval(value), description, "assert_null")


def assert_not_null(value: Any, description: str | None = None) -> None:
    _check(is_not_null().eval(value), description, "assert_not_null")


def succeed() -> None:
    check_test(AssertionResult(True), "succeed")


def fail(description: str = "fail") -> None:
    _check(AssertionResult(False), description, "fail")
