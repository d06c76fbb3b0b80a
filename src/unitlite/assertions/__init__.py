"""Assertion system: matchers, value rendering and the check_test entry point."""

from unitlite.assertions.base import AssertionResult, Matcher
from unitlite.assertions.check import (
    assert_equal,
    assert_false,
    assert_not_equal,
    assert_not_null,
    assert_null,
    assert_that,
    assert_true,
    check_test,
    fail,
    succeed,
)
from unitlite.assertions.combinators import (
    AllOfMatcher,
    AnyOfMatcher,
    NotMatcher,
    all_of,
    any_of,
    not_,
)
from unitlite.assertions.containers import (
    IteratorRange,
    array_of_length,
    find_in_container,
    range_of,
)
from unitlite.assertions.matchers import (
    begins_with,
    contains,
    ends_with,
    has_entry,
    has_item,
    has_items,
    has_key,
    has_keys,
    is_,
    is_approximately,
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in,
    is_in_range,
    is_less_than,
    is_less_than_or_equal_to,
    is_not,
    is_not_equal_to,
    is_not_null,
    is_null,
    is_one_of,
    matches,
    starts_with,
)
from unitlite.assertions.rendering import get_string_repr

__all__ = [
    "AllOfMatcher",
    "AnyOfMatcher",
    "AssertionResult",
    "IteratorRange",
    "Matcher",
    "NotMatcher",
    "all_of",
    "any_of",
    "array_of_length",
    "assert_equal",
    "assert_false",
    "assert_not_equal",
    "assert_not_null",
    "assert_null",
    "assert_that",
    "assert_true",
    "begins_with",
    "check_test",
    "contains",
    "ends_with",
    "fail",
    "find_in_container",
    "get_string_repr",
    "has_entry",
    "has_item",
    "has_items",
    "has_key",
    "has_keys",
    "is_",
    "is_approximately",
    "is_equal_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_in",
    "is_in_range",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_not",
    "is_not_equal_to",
    "is_not_null",
    "is_null",
    "is_one_of",
    "matches",
    "not_",
    "range_of",
    "starts_with",
    "succeed",
]
