"""Self-contained unit testing: registry, time-bounded runner and matchers."""

from unitlite.assertions import (
    AssertionResult,
    IteratorRange,
    Matcher,
    all_of,
    any_of,
    array_of_length,
    assert_equal,
    assert_false,
    assert_not_equal,
    assert_not_null,
    assert_null,
    assert_that,
    assert_true,
    begins_with,
    check_test,
    contains,
    ends_with,
    fail,
    get_string_repr,
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
    not_,
    range_of,
    starts_with,
    succeed,
)
from unitlite.config import RunConfig, load_config
from unitlite.context import call_log, clear_call_log, expected_to_fail, log_call
from unitlite.errors import AssertionFailure, ConfigurationError
from unitlite.metrics import RunSummary
from unitlite.registry import Registry, TestDescriptor
from unitlite.runner import Completion, Outcome, Runner, RunState, TestOutcome

__all__ = [
    "AssertionFailure",
    "AssertionResult",
    "Completion",
    "ConfigurationError",
    "IteratorRange",
    "Matcher",
    "Outcome",
    "Registry",
    "RunConfig",
    "RunState",
    "RunSummary",
    "Runner",
    "TestDescriptor",
    "TestOutcome",
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
    "call_log",
    "check_test",
    "clear_call_log",
    "contains",
    "ends_with",
    "expected_to_fail",
    "fail",
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
    "load_config",
    "log_call",
    "matches",
    "not_",
    "range_of",
    "starts_with",
    "succeed",
]
