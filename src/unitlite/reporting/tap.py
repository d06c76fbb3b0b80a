"""Test Anything Protocol output."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from unitlite.reporting.base import Reporter

if TYPE_CHECKING:
    from unitlite.metrics import RunSummary
    from unitlite.runner import TestOutcome

COMMENT_PREFIX = "# "


def msg_comment(commentary: str) -> str:
    """Prefix every line of ``commentary`` with ``# `` unless it already is.

    A trailing newline yields a final line holding just the prefix.
    """
    lines = commentary.split("\n")
    return "\n".join(
        line if line.startswith(COMMENT_PREFIX) else COMMENT_PREFIX + line
        for line in lines
    )


class TapReporter(Reporter):
    def __init__(self, stream: TextIO | None = None, diagnostics_before_results: bool = True):
        super().__init__(stream)
        self.diagnostics_before_results = diagnostics_before_results

    def _with_diagnostic(self, result_line: str, diagnostic: str | None) -> None:
        if not diagnostic:
            self.emit(result_line)
            return
        comment = msg_comment(diagnostic)
        if self.diagnostics_before_results:
            self.emit(comment + "\n" + result_line)
        else:
            self.emit(result_line + "\n" + comment)

    def start(self, total: int, warnings: list[str]) -> None:
        self.emit(f"1..{total}")
        for warning in warnings:
            self.emit(msg_comment(f"Warning: {warning}"))

    def test_finished(self, result: TestOutcome) -> None:
        from unitlite.runner import Completion, Outcome

        label = f"{result.number} - {result.name}"
        if result.outcome is Outcome.SUCCESS:
            self._with_diagnostic(f"ok {label}", result.note)
        elif result.outcome is Outcome.ERROR and result.completion is not Completion.TIMED_OUT:
            self._with_diagnostic(f"not ok {label}", f"ERROR - {result.diagnostic or ''}")
        else:
            self._with_diagnostic(f"not ok {label}", result.diagnostic)

    def finish(self, summary: RunSummary) -> None:
        self.emit(
            f"# UnitTest: passed {summary.succeeded} out of {summary.tests_run} tests, "
            f"for a success rate of {summary.success_rate:.1f}%"
        )
