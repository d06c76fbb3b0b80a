"""Boolean combinations of matchers."""

from __future__ import annotations

from typing import Any

from unitlite.assertions.base import AssertionResult, Matcher


class NotMatcher(Matcher):
    def __init__(self, inner: Matcher):
        self.inner = inner

    def _eval(self, subject: Any) -> AssertionResult:
        result = self.inner.eval(subject)
        return AssertionResult(
            not result.matched, result.fail_explanation, result.pass_explanation
        )


class AllOfMatcher(Matcher):
    """Matches when every sub-matcher matches; stops at the first that does not."""

    def __init__(self, *matchers: Matcher):
        self.matchers = list(matchers)

    def _eval(self, subject: Any) -> AssertionResult:
        for matcher in self.matchers:
            result = matcher.eval(subject)
            if not result.matched:
                return AssertionResult(
                    False, "All of the conditions were true", result.fail_explanation
                )
        return AssertionResult(True, "All of the conditions were true", "")


class AnyOfMatcher(Matcher):
    """Matches when some sub-matcher matches; stops at the first that does."""

    def __init__(self, *matchers: Matcher):
        self.matchers = list(matchers)

    def _eval(self, subject: Any) -> AssertionResult:
        for matcher in self.matchers:
            result = matcher.eval(subject)
            if result.matched:
                return AssertionResult(
                    True, result.pass_explanation, "None of the conditions were true"
                )
        return AssertionResult(False, "", "None of the conditions were true")


def not_(inner: Matcher) -> NotMatcher:
    return NotMatcher(inner)


def all_of(*matchers: Matcher) -> AllOfMatcher:
    return AllOfMatcher(*matchers)


def any_of(*matchers: Matcher) -> AnyOfMatcher:
    return AnyOfMatcher(*matchers)
