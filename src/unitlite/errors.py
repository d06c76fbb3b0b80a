"""Exception types raised by the registry, runner and assertion engine."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A non-fatal problem with how tests were registered or selected."""


class AssertionFailure(AssertionError):
    """Raised by check_test when an assertion does not hold.

    Attributes:
        description: Rendering of the checked condition (usually the source line).
        explanation: The matcher's failExplanation, possibly empty.
        location: ``file:line`` of the failing assertion.
        expected_to_fail: Whether the active test had called expected_to_fail().
    """

    def __init__(
        self,
        description: str,
        explanation: str = "",
        location: str = "",
        expected_to_fail: bool = False,
    ):
        self.description = description
        self.explanation = explanation
        self.location = location
        self.expected_to_fail = expected_to_fail
        super().__init__(self.render())

    def render(self) -> str:
        if self.expected_to_fail:
            return "(expected to fail)"
        text = f"at {self.location}\n\t{self.description}"
        if self.explanation:
            text += f"\n\t{self.explanation}"
        return text
