"""GoogleTest-style console output, for tools that scrape gtest banners."""

from __future__ import annotations

from typing import TYPE_CHECKING

from unitlite.reporting.base import Reporter

if TYPE_CHECKING:
    from unitlite.metrics import RunSummary
    from unitlite.runner import TestOutcome


class GTestReporter(Reporter):
    def start(self, total: int, warnings: list[str]) -> None:
        for warning in warnings:
            self.emit(f"Warning: {warning}")
        self.emit(f"[==========] Running {total} tests.")

    def test_started(self, number: int, name: str) -> None:
        self.emit(f"[ RUN      ] {name}")

    def test_finished(self, result: TestOutcome) -> None:
        from unitlite.runner import Outcome

        elapsed = f"({result.elapsed_ms:.0f} ms)"
        if result.outcome is Outcome.SUCCESS:
            self.emit(f"[       OK ] {result.name} {elapsed}")
        else:
            self.emit(result.diagnostic or "")
            self.emit(f"[  FAILED  ] {result.name} {elapsed}")

    def finish(self, summary: RunSummary) -> None:
        self.emit(f"[==========] {summary.tests_run} tests ran.")
        self.emit(f"[  PASSED  ] {summary.succeeded} tests.")
        if summary.failed_tests:
            self.emit(
                f"[  FAILED  ] {len(summary.failed_tests)} tests, listed below:"
            )
            for name in summary.failed_tests:
                self.emit(f"[  FAILED  ] {name}")
