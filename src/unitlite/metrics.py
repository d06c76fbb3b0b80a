from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from unitlite.runner import TestOutcome


@dataclass
class MetricStatistics:
    """Statistics for a single metric across tests."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass
class RunSummary:
    """Final tallies of a run, handed to the reporter."""

    succeeded: int
    failed: int
    errored: int
    failed_tests: list[str]
    outcomes: list[TestOutcome] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    elapsed_ms: MetricStatistics | None = None

    @property
    def tests_run(self) -> int:
        return self.succeeded + self.failed + self.errored

    @property
    def success_rate(self) -> float:
        if self.tests_run == 0:
            return 0.0
        return round(100.0 * self.succeeded / self.tests_run, 1)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0 and self.errored == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "tests_run": self.tests_run,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "errored": self.errored,
            "success_rate": self.success_rate,
            "failed_tests": list(self.failed_tests),
            "warnings": list(self.warnings),
            "elapsed_ms": self.elapsed_ms.to_dict() if self.elapsed_ms else None,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


def compute_stats(values: list[float | int | None]) -> MetricStatistics:
    """Compute avg, min, max, stddev for a list of numeric values."""
    nums = [v for v in values if v is not None]
    if not nums:
        return MetricStatistics(avg=None, min=None, max=None, stddev=None)

    arr = np.array(nums)
    return MetricStatistics(
        avg=round(float(np.mean(arr)), 4),
        min=round(float(np.min(arr)), 4),
        max=round(float(np.max(arr)), 4),
        stddev=round(float(np.std(arr)), 4),
    )
