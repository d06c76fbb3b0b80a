from __future__ import annotations

from typing import TYPE_CHECKING

from unitlite.reporting.base import Reporter

if TYPE_CHECKING:
    from unitlite.metrics import RunSummary
    from unitlite.runner import TestOutcome


class PlainReporter(Reporter):
    """Terse human-readable output: one status line per test."""

    def test_finished(self, result: TestOutcome) -> None:
        status = result.outcome.value.upper()
        self.emit(f"  [{result.number}] {status:<7} {result.name} ({result.elapsed_ms:.0f}ms)")
        if result.diagnostic:
            self.emit("\n".join("      " + line for line in result.diagnostic.splitlines()))

    def finish(self, summary: RunSummary) -> None:
        self.emit(
            f"{summary.tests_run} test(s): {summary.succeeded} passed, "
            f"{summary.failed} failed, {summary.errored} errors"
        )
        for name in summary.failed_tests:
            self.emit(f"  not passed: {name}")
