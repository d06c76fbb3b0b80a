"""Leaf matchers and the factory functions used to build them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from unitlite.assertions.base import AssertionResult, Matcher
from unitlite.assertions.containers import (
    NOT_FOUND,
    IteratorRange,
    find_in_container,
    values_equal,
)
from unitlite.assertions.rendering import get_string_repr as r


# --- relational ---


class EqualToMatcher(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def _eval(self, subject: Any) -> AssertionResult:
        return AssertionResult(
            values_equal(subject, self.expected),
            f"Both values were: {r(subject)}",
            f"Expected: {r(self.expected)}\n\tObserved: {r(subject)}",
        )


class NotEqualToMatcher(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def _eval(self, subject: Any) -> AssertionResult:
        return AssertionResult(
            not values_equal(subject, self.expected),
            f"Expected: {r(self.expected)}\n\tObserved: {r(subject)}",
            f"Both values were: {r(subject)}",
        )


class ApproximatelyEqualToMatcher(Matcher):
    def __init__(self, expected: Any, delta: Any):
        self.expected = expected
        self.delta = delta

    def _eval(self, subject: Any) -> AssertionResult:
        low = self.expected - self.delta
        high = self.expected + self.delta
        inside = r(subject) + f" is between {r(low)} and {r(high)}"
        if subject < low or subject > high:
            return AssertionResult(
                False, inside, f"{r(subject)} is outside the range {r(low)} .. {r(high)}"
            )
        return AssertionResult(True, inside, "")


class LessThanMatcher(Matcher):
    def __init__(self, bound: Any):
        self.bound = bound

    def _eval(self, subject: Any) -> AssertionResult:
        left, right = r(subject), r(self.bound)
        return AssertionResult(
            bool(subject < self.bound),
            f"{left} is less than {right}",
            f"{left} is not less than {right}",
        )


class GreaterThanMatcher(Matcher):
    def __init__(self, bound: Any):
        self.bound = bound

    def _eval(self, subject: Any) -> AssertionResult:
        left, right = r(subject), r(self.bound)
        return AssertionResult(
            bool(self.bound < subject),
            f"{left} is greater than {right}",
            f"{left} is not greater than {right}",
        )


class LessThanOrEqualToMatcher(Matcher):
    def __init__(self, bound: Any):
        self.bound = bound

    def _eval(self, subject: Any) -> AssertionResult:
        left, right = r(subject), r(self.bound)
        return AssertionResult(
            not (self.bound < subject),
            f"{left} is less than or equal to {right}",
            f"{left} is greater than {right}",
        )


class GreaterThanOrEqualToMatcher(Matcher):
    def __init__(self, bound: Any):
        self.bound = bound

    def _eval(self, subject: Any) -> AssertionResult:
        left, right = r(subject), r(self.bound)
        return AssertionResult(
            not (subject < self.bound),
            f"{left} is greater than or equal to {right}",
            f"{left} is less than {right}",
        )


class OneOfMatcher(Matcher):
    def __init__(self, *candidates: Any):
        self.candidates = list(candidates)

    def _eval(self, subject: Any) -> AssertionResult:
        found = f"Found {r(subject)} in {r(self.candidates)}"
        missing = f"Could not find {r(subject)} in {r(self.candidates)}"
        matched = any(values_equal(subject, c) for c in self.candidates)
        return AssertionResult(matched, found, missing)


# --- strings ---


class StringContainsMatcher(Matcher):
    """Substring search. A non-string subject is searched as a container."""

    def __init__(self, needle: str):
        self.needle = needle

    def _eval(self, subject: Any) -> AssertionResult:
        if not isinstance(subject, str):
            return ContainsElementMatcher(self.needle).eval(subject)
        pos = subject.find(self.needle)
        return AssertionResult(
            pos >= 0,
            f"Found {r(self.needle)} starting in position {pos} of {r(subject)}",
            f"Within {r(subject)}, cannot find {r(self.needle)}",
        )


class StringBeginsWithMatcher(Matcher):
    def __init__(self, prefix: str):
        self.prefix = prefix

    def _eval(self, subject: Any) -> AssertionResult:
        text, prefix = r(subject), r(self.prefix)
        return AssertionResult(
            isinstance(subject, str) and subject.startswith(self.prefix),
            f"{text} begins with {prefix}",
            f"{text} does not begin with {prefix}",
        )


class StringEndsWithMatcher(Matcher):
    def __init__(self, suffix: str):
        self.suffix = suffix

    def _eval(self, subject: Any) -> AssertionResult:
        text, suffix = r(subject), r(self.suffix)
        return AssertionResult(
            isinstance(subject, str) and subject.endswith(self.suffix),
            f"{text} ends with {suffix}",
            f"{text} does not end with {suffix}",
        )


# --- null ---


class NullMatcher(Matcher):
    def _eval(self, subject: Any) -> AssertionResult:
        return AssertionResult(subject is None, "", f"{r(subject)} is not None")


class NotNullMatcher(Matcher):
    def _eval(self, subject: Any) -> AssertionResult:
        return AssertionResult(subject is not None, "", "value was None")


# --- containers ---


class ContainsElementMatcher(Matcher):
    def __init__(self, element: Any):
        self.element = element

    def _eval(self, subject: Any) -> AssertionResult:
        container, element = r(subject), r(self.element)
        pos = find_in_container(subject, self.element)
        return AssertionResult(
            pos != NOT_FOUND,
            f"Found {element} in position {pos} of {container}",
            f"Could not find {element} in {container}",
        )


class HasEntryMatcher(Matcher):
    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value

    def _eval(self, subject: Any) -> AssertionResult:
        container = r(subject)
        expected = r((self.key, self.value))
        if not isinstance(subject, Mapping):
            return AssertionResult(
                False, "", f"{container} does not support lookup by key"
            )
        try:
            present = self.key in subject
        except TypeError:
            present = False
        if not present:
            return AssertionResult(
                False, "", f"Could not find {r(self.key)} in {container}"
            )
        found = r((self.key, subject[self.key]))
        return AssertionResult(
            values_equal(subject[self.key], self.value),
            f"Found {found} in {container}",
            f"Could not find {expected} in {container}; found {found}",
        )


class HasItemsMatcher(Matcher):
    def __init__(self, *items: Any):
        self.items = list(items)

    def _eval(self, subject: Any) -> AssertionResult:
        container = r(subject)
        found_all = f"Found all of {r(self.items)} in {container}"
        for item in self.items:
            if find_in_container(subject, item) == NOT_FOUND:
                return AssertionResult(
                    False, found_all, f"Did not find {r(item)} in {container}"
                )
        return AssertionResult(True, found_all, found_all)


def _as_sequence(items: Iterable[Any]):
    if isinstance(items, (list, tuple, str, IteratorRange)):
        return items
    return IteratorRange(items)


class SequenceMatchesMatcher(Matcher):
    """Element-wise equality of the subject range with an expected range."""

    def __init__(self, expected: Iterable[Any]):
        self.expected = _as_sequence(expected)

    def _eval(self, subject: Any) -> AssertionResult:
        actual = _as_sequence(subject)
        if len(self.expected) != len(actual):
            return AssertionResult(
                False,
                "",
                f"Ranges are of different length ({len(self.expected)} and {len(actual)})",
            )
        for position, (left, right) in enumerate(zip(self.expected, actual)):
            if not values_equal(left, right):
                return AssertionResult(
                    False, "", f"In position {position}, {r(left)} != {r(right)}"
                )
        return AssertionResult(True, "All corresponding elements were equal.", "")


class IsInMatcher(Matcher):
    """The subject is the candidate; the container is the haystack."""

    def __init__(self, container: Iterable[Any]):
        if isinstance(container, Iterator):
            container = IteratorRange(container)
        self.container = container

    def _eval(self, subject: Any) -> AssertionResult:
        element, container = r(subject), r(self.container)
        pos = find_in_container(self.container, subject)
        return AssertionResult(
            pos != NOT_FOUND,
            f"Found {element} in position {pos} of {container}",
            f"Could not find {element} in {container}",
        )


class IsInRangeMatcher(Matcher):
    def __init__(self, items: Iterable[Any], start: int = 0, stop: int | None = None):
        self.range = IteratorRange(items, start, stop)

    def _eval(self, subject: Any) -> AssertionResult:
        element = r(subject)
        pos = find_in_container(self.range, subject)
        return AssertionResult(
            pos != NOT_FOUND,
            f"Found {element} in range, {pos} steps from the start",
            f"Could not find {element} in the range",
        )


# --- factories ---


def is_equal_to(expected: Any) -> EqualToMatcher:
    return EqualToMatcher(expected)


is_ = is_equal_to


def is_not_equal_to(expected: Any) -> NotEqualToMatcher:
    return NotEqualToMatcher(expected)


is_not = is_not_equal_to


def is_approximately(expected: Any, delta: Any) -> ApproximatelyEqualToMatcher:
    return ApproximatelyEqualToMatcher(expected, delta)


def is_less_than(bound: Any) -> LessThanMatcher:
    return LessThanMatcher(bound)


def is_greater_than(bound: Any) -> GreaterThanMatcher:
    return GreaterThanMatcher(bound)


def is_less_than_or_equal_to(bound: Any) -> LessThanOrEqualToMatcher:
    return LessThanOrEqualToMatcher(bound)


def is_greater_than_or_equal_to(bound: Any) -> GreaterThanOrEqualToMatcher:
    return GreaterThanOrEqualToMatcher(bound)


def is_one_of(*candidates: Any) -> OneOfMatcher:
    return OneOfMatcher(*candidates)


def contains(needle: Any) -> Matcher:
    """Substring match for a string argument, element search otherwise."""
    if isinstance(needle, str):
        return StringContainsMatcher(needle)
    return ContainsElementMatcher(needle)


def has_item(element: Any) -> ContainsElementMatcher:
    return ContainsElementMatcher(element)


has_key = has_item


def has_items(*items: Any) -> HasItemsMatcher:
    return HasItemsMatcher(*items)


has_keys = has_items


def has_entry(key: Any, value: Any) -> HasEntryMatcher:
    return HasEntryMatcher(key, value)


def begins_with(prefix: str) -> StringBeginsWithMatcher:
    return StringBeginsWithMatcher(prefix)


starts_with = begins_with


def ends_with(suffix: str) -> StringEndsWithMatcher:
    return StringEndsWithMatcher(suffix)


def is_null() -> NullMatcher:
    return NullMatcher()


def is_not_null() -> NotNullMatcher:
    return NotNullMatcher()


def matches(expected: Iterable[Any]) -> SequenceMatchesMatcher:
    return SequenceMatchesMatcher(expected)


def is_in(container: Iterable[Any]) -> IsInMatcher:
    return IsInMatcher(container)


def is_in_range(items: Iterable[Any], start: int = 0, stop: int | None = None) -> IsInRangeMatcher:
    return IsInRangeMatcher(items, start, stop)
