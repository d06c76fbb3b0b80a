"""Tests for leaf matchers and container lookup."""

import itertools
import time

import numpy as np
import pytest

from unitlite.assertions import (
    IteratorRange,
    array_of_length,
    begins_with,
    contains,
    ends_with,
    has_entry,
    has_item,
    has_items,
    has_key,
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
    is_not_null,
    is_null,
    is_one_of,
    matches,
    range_of,
    starts_with,
)
from unitlite.assertions.containers import NOT_FOUND, find_in_container


# --- relational ---


def test_equal_to_pass_and_fail():
    assert is_equal_to(3).eval(3).matched
    result = is_(3).eval(4)
    assert not result.matched
    assert result.fail_explanation == "Expected: 3\n\tObserved: 4"


def test_equal_to_pass_explanation():
    assert is_(3).eval(3).pass_explanation == "Both values were: 3"


def test_not_equal_to():
    assert is_not(3).eval(4).matched
    result = is_not(3).eval(3)
    assert not result.matched
    assert result.fail_explanation == "Both values were: 3"


def test_approximately_inside_and_outside():
    assert is_approximately(1.0, 0.1).eval(1.05).matched
    result = is_approximately(1.0, 0.1).eval(1.5)
    assert not result.matched
    assert result.fail_explanation == "1.5 is outside the range 0.9 .. 1.1"


@pytest.mark.parametrize(
    "factory, bound, subject, expected",
    [
        (is_less_than, 5, 3, True),
        (is_less_than, 5, 5, False),
        (is_greater_than, 5, 7, True),
        (is_greater_than, 5, 5, False),
        (is_less_than_or_equal_to, 5, 5, True),
        (is_less_than_or_equal_to, 5, 6, False),
        (is_greater_than_or_equal_to, 5, 5, True),
        (is_greater_than_or_equal_to, 5, 4, False),
    ],
)
def test_ordering_matchers(factory, bound, subject, expected):
    assert factory(bound).eval(subject).matched is expected


def test_less_than_explanations():
    result = is_less_than(2).eval(3)
    assert result.fail_explanation == "3 is not less than 2"
    assert is_less_than(4).eval(3).pass_explanation == "3 is less than 4"


def test_one_of():
    result = is_one_of(1, 2, 3).eval(2)
    assert result.matched
    assert result.pass_explanation == "Found 2 in [1, 2, 3]"
    result = is_one_of(1, 2, 3).eval(4)
    assert not result.matched
    assert result.fail_explanation == "Could not find 4 in [1, 2, 3]"


def test_incomparable_subject_is_a_failure_not_an_exception():
    result = is_less_than(3).eval("x")
    assert not result.matched
    assert "TypeError" in result.fail_explanation


# --- strings ---


def test_string_contains():
    result = contains("bc").eval("abcd")
    assert result.matched
    assert result.pass_explanation == 'Found "bc" starting in position 1 of "abcd"'
    result = contains("zz").eval("abcd")
    assert not result.matched
    assert result.fail_explanation == 'Within "abcd", cannot find "zz"'


def test_string_needle_in_list_searches_elements():
    assert contains("ab").eval(["x", "ab"]).matched
    assert not contains("ab").eval(["abc"]).matched


def test_begins_and_ends_with():
    assert begins_with("ab").eval("abc").matched
    assert starts_with("ab").eval("abc").matched
    assert not begins_with("bc").eval("abc").matched
    assert ends_with("bc").eval("abc").matched
    result = ends_with("ab").eval("abc")
    assert not result.matched
    assert result.fail_explanation == '"abc" does not end with "ab"'


def test_string_matchers_reject_non_strings():
    assert not begins_with("1").eval(123).matched


# --- null ---


def test_null_and_not_null():
    assert is_null().eval(None).matched
    assert not is_null().eval(0).matched
    assert is_not_null().eval(0).matched
    assert not is_not_null().eval(None).matched


# --- containers ---


def test_contains_element_reports_position():
    result = has_item(5).eval([1, 3, 5, 9])
    assert result.matched
    assert result.pass_explanation == "Found 5 in position 2 of [1, 3, 5, 9]"


def test_contains_element_missing():
    result = contains(4).eval([1, 3, 5, 9])
    assert not result.matched
    assert result.fail_explanation == "Could not find 4 in [1, 3, 5, 9]"


def test_keyed_container_tracks_insertions_and_removals():
    bag = {1, 3}
    assert not has_item(7).eval(bag).matched
    bag.add(7)
    assert has_item(7).eval(bag).matched
    bag.remove(7)
    assert not has_item(7).eval(bag).matched


def test_mapping_lookup_by_key():
    assert has_key("a").eval({"a": 1}).matched
    assert not has_key("b").eval({"a": 1}).matched


def test_unhashable_element_is_not_found():
    assert find_in_container({1, 2}, [1]) == NOT_FOUND


def test_find_in_range_object():
    assert find_in_container(range(10, 20), 13) == 3
    assert find_in_container(range(10, 20), 30) == NOT_FOUND


def test_has_entry():
    assert has_entry(1, 10).eval({1: 10}).matched

    result = has_entry(2, 10).eval({1: 10})
    assert not result.matched
    assert result.fail_explanation == "Could not find 2 in [<1, 10>]"

    result = has_entry(1, 11).eval({1: 10})
    assert not result.matched
    assert "<1, 11>" in result.fail_explanation
    assert "found <1, 10>" in result.fail_explanation


def test_has_entry_on_non_mapping_fails():
    assert not has_entry(0, 1).eval([1]).matched


def test_has_items_names_the_missing_item():
    assert has_items(3, 9).eval([1, 3, 5, 9]).matched
    result = has_items(3, 9, 42).eval([1, 3, 5, 9])
    assert not result.matched
    assert "42" in result.fail_explanation
    assert result.fail_explanation == "Did not find 42 in [1, 3, 5, 9]"


def test_matches_equal_sequences():
    result = matches([1, 2, 3]).eval((1, 2, 3))
    assert result.matched
    assert result.pass_explanation == "All corresponding elements were equal."


def test_matches_length_mismatch():
    result = matches([1, 2, 3]).eval([1, 2])
    assert not result.matched
    assert result.fail_explanation == "Ranges are of different length (3 and 2)"


def test_matches_first_differing_position():
    result = matches([1, 2, 3]).eval([1, 5, 3])
    assert not result.matched
    assert result.fail_explanation == "In position 1, 2 != 5"


def test_matches_generator_subject():
    assert matches([0, 1, 4]).eval(x * x for x in range(3)).matched


def test_is_in():
    result = is_in([1, 3, 5]).eval(3)
    assert result.matched
    assert result.pass_explanation == "Found 3 in position 1 of [1, 3, 5]"
    assert not is_in([1, 3, 5]).eval(4).matched


def test_is_in_iterator_can_be_evaluated_twice():
    matcher = is_in(iter([1, 2]))
    assert matcher.eval(2).matched
    assert matcher.eval(2).matched


def test_is_in_range():
    result = is_in_range([1, 2, 3, 4], 1, 3).eval(3)
    assert result.matched
    assert result.pass_explanation == "Found 3 in range, 1 steps from the start"
    result = is_in_range([1, 2, 3, 4], 1, 3).eval(4)
    assert not result.matched
    assert result.fail_explanation == "Could not find 4 in the range"


def test_iterator_range_views():
    view = range_of([1, 2, 3, 4], 1, 3)
    assert list(view) == [2, 3]
    assert len(view) == 2
    assert list(array_of_length([7, 8, 9], 2)) == [7, 8]
    assert isinstance(view, IteratorRange)
    assert matches([2, 3]).eval(view).matched


# --- large and endless haystacks ---


class Naturals:
    def __iter__(self):
        return itertools.count()


def test_contains_on_endless_iterable_returns():
    result = contains(5).eval(Naturals())
    assert result.matched
    assert result.pass_explanation == (
        "Found 5 in position 5 of [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, ...]"
    )


def test_is_in_huge_range_is_fast():
    start = time.monotonic()
    result = is_in(range(10**12)).eval(5)
    assert result.matched
    assert time.monotonic() - start < 1.0


# --- numpy values ---


def test_numpy_arrays_compare_whole():
    assert is_(np.array([1, 2])).eval(np.array([1, 2])).matched
    assert not is_(np.array([1, 2])).eval(np.array([1, 3])).matched
    assert not is_(np.array([1, 2])).eval(np.array([1, 2, 3])).matched
    assert is_not(np.array([1, 2])).eval(np.array([2, 1])).matched


def test_numpy_array_against_list():
    assert is_equal_to([1, 2]).eval(np.array([1, 2])).matched


def test_numpy_array_in_containers():
    assert is_one_of(np.array([0]), np.array([1, 2])).eval(np.array([1, 2])).matched
    assert has_item(np.array([3])).eval([np.array([1]), np.array([3])]).matched
    assert has_entry("w", np.array([1.0, 2.0])).eval({"w": np.array([1.0, 2.0])}).matched
    assert matches([np.array([1]), np.array([2])]).eval(
        [np.array([1]), np.array([2])]
    ).matched
