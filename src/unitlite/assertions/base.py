"""Base data structures for the assertion system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AssertionResult:
    """Result of evaluating one matcher against one subject.

    Attributes:
        matched: Whether the subject satisfied the matcher.
        pass_explanation: Detail describing why the match held. May be empty.
        fail_explanation: Detail describing why the match did not hold. May be
            empty. Only rendered when the enclosing test fails.
    """

    matched: bool
    pass_explanation: str = ""
    fail_explanation: str = ""


class Matcher(ABC):
    """A reusable predicate over a subject that explains its verdict.

    Subclasses implement ``_eval``. ``eval`` is total: an exception raised while
    comparing or rendering values is turned into a non-matching result.
    """

    def eval(self, subject: Any) -> AssertionResult:
        try:
            return self._eval(subject)
        except Exception as e:
            return AssertionResult(
                False,
                "",
                f"{type(self).__name__} could not evaluate subject: "
                f"{type(e).__name__}: {e}",
            )

    @abstractmethod
    def _eval(self, subject: Any) -> AssertionResult: ...

    def __invert__(self) -> Matcher:
        from unitlite.assertions.combinators import NotMatcher

        return NotMatcher(self)

    def __and__(self, other: Matcher) -> Matcher:
        from unitlite.assertions.combinators import AllOfMatcher

        return AllOfMatcher(self, other)

    def __or__(self, other: Matcher) -> Matcher:
        from unitlite.assertions.combinators import AnyOfMatcher

        return AnyOfMatcher(self, other)
