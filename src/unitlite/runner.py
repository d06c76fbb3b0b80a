from __future__ import annotations

import logging
import threading
import time
import traceback
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Callable, Iterable

from unitlite.context import TestContext, activate
from unitlite.debugger import debugger_is_running
from unitlite.faults import contained, fault_identifier, install_fault_handlers
from unitlite.metrics import RunSummary, compute_stats
from unitlite.registry import Registry, TestBody, TestDescriptor
from unitlite.reporting.base import Reporter

logger = logging.getLogger(__name__)


class Completion(str, Enum):
    """How a test body stopped, before the expectation flag is applied."""

    COMPLETED = "completed"
    ASSERTION_RAISED = "assertion_raised"
    FAULTED = "faulted"
    TIMED_OUT = "timed_out"
    UNCAUGHT_OTHER = "uncaught_other"


class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


def classify(completion: Completion, expect_to_fail: bool) -> Outcome:
    """Apply expectation inversion to a raw completion."""
    if expect_to_fail:
        if completion is Completion.COMPLETED:
            return Outcome.FAILURE
        return Outcome.SUCCESS
    if completion is Completion.COMPLETED:
        return Outcome.SUCCESS
    if completion is Completion.ASSERTION_RAISED:
        return Outcome.FAILURE
    return Outcome.ERROR


@dataclass
class TestOutcome:
    """Per-test result event delivered to the reporter.

    ``diagnostic`` is set iff the outcome is not SUCCESS. ``note`` carries the
    swallowed detail of a test that failed as expected.
    """

    __test__ = False

    number: int
    name: str
    outcome: Outcome
    completion: Completion
    expected_to_fail: bool
    time_limit_ms: int
    bounded: bool
    elapsed_ms: float
    diagnostic: str | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["outcome"] = self.outcome.value
        d["completion"] = self.completion.value
        return d


@dataclass
class RunState:
    """Counters for one run. Only the supervising thread mutates it."""

    current_test: str | None = None
    expect_to_fail: bool = False
    success_count: int = 0
    failure_count: int = 0
    error_count: int = 0
    failed_tests: list[str] = field(default_factory=list)
    outcomes: list[TestOutcome] = field(default_factory=list)

    def begin(self, name: str) -> None:
        self.current_test = name
        self.expect_to_fail = False

    def record(self, result: TestOutcome) -> None:
        if result.outcome is Outcome.SUCCESS:
            self.success_count += 1
        elif result.outcome is Outcome.FAILURE:
            self.failure_count += 1
        else:
            self.error_count += 1
        if result.outcome is not Outcome.SUCCESS:
            self.failed_tests.append(result.name)
        self.outcomes.append(result)


@dataclass
class _Signal:
    completion: Completion
    detail: str = ""


class _ResultSlot:
    """One-shot handoff from a worker thread to its supervisor."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._signal: _Signal | None = None

    def put(self, signal: _Signal) -> None:
        with self._lock:
            if self._signal is None:
                self._signal = signal
        self._done.set()

    def wait(self, timeout: float) -> _Signal | None:
        if not self._done.wait(timeout):
            return None
        with self._lock:
            return self._signal


def _assertion_detail(exc: AssertionError) -> str:
    text = str(exc)
    if text:
        return text
    # bare `assert` statement without a message
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "assertion failed"
    last = frames[-1]
    return f"at {last.filename}:{last.lineno}\n\t{last.line or 'assert'}"


def run_guarded(name: str, body: TestBody, context: TestContext) -> _Signal:
    """Run ``body`` with ``context`` active and turn how it ended into a signal."""
    with activate(context), contained():
        try:
            body()
        except AssertionError as e:
            return _Signal(Completion.ASSERTION_RAISED, _assertion_detail(e))
        except Exception as e:
            identifier = fault_identifier(e)
            if identifier is not None:
                return _Signal(
                    Completion.FAULTED,
                    f"runtime error {identifier} in {name}: {type(e).__name__}: {e}",
                )
            message = f"Unexpected error in {name}: {type(e).__name__}"
            if str(e):
                message += f": {e}"
            return _Signal(Completion.UNCAUGHT_OTHER, message)
    return _Signal(Completion.COMPLETED)


class Runner:
    """Runs selected tests one at a time and accumulates a RunState.

    A test with a positive time limit runs on a daemon worker thread while the
    calling thread waits up to the limit. On expiry the worker is abandoned,
    not stopped: whatever it does afterwards lands in its private context and
    result slot, which are never consulted again.

    Tests registered without a limit get ``default_time_limit_ms``, or the
    registry's own default when that is None.
    """

    def __init__(
        self,
        registry: Registry,
        reporter: Reporter | None = None,
        state: RunState | None = None,
        debugger_check: Callable[[], bool] = debugger_is_running,
        ignore_debugger: bool = False,
        default_time_limit_ms: int | None = None,
    ):
        self.registry = registry
        if default_time_limit_ms is None:
            default_time_limit_ms = registry.default_time_limit_ms
        self.default_time_limit_ms = default_time_limit_ms
        self.reporter = reporter or Reporter()
        self.state = state or RunState()
        self.debugger_check = debugger_check
        self.ignore_debugger = ignore_debugger
        self.warnings: list[str] = []

    def run(self, tokens: Iterable[str] = ()) -> RunSummary:
        """Run every test selected by ``tokens`` and report the summary."""
        selection = self.registry.select(tokens)
        self.warnings.extend(selection.warnings)
        logger.debug(f"Running {len(selection.names)} test(s)")
        self.reporter.start(len(selection.names), selection.warnings)

        for number, name in enumerate(selection.names, start=1):
            self.run_test(number, self.registry[name])

        summary = self.summary()
        self.reporter.finish(summary)
        return summary

    def run_test(self, number: int, test: TestDescriptor) -> TestOutcome:
        self.state.begin(test.name)
        context = TestContext(test.name)
        install_fault_handlers()
        self.reporter.test_started(number, test.name)

        limit = test.limit(self.default_time_limit_ms)
        bounded = limit > 0 and (self.ignore_debugger or not self.debugger_check())
        start = time.monotonic()
        if bounded:
            signal = self._run_bounded(number, test, limit, context)
        else:
            signal = run_guarded(test.name, test.body, context)
        elapsed_ms = round((time.monotonic() - start) * 1000, 3)

        self.state.expect_to_fail = context.expect_to_fail
        result = self._outcome(number, test, signal, limit, bounded, elapsed_ms)
        self.state.record(result)
        logger.debug(
            f"Test {number} - {test.name}: {result.outcome.value} "
            f"({signal.completion.value}, {elapsed_ms:.0f}ms)"
        )
        self.reporter.test_finished(result)
        return result

    def _run_bounded(
        self, number: int, test: TestDescriptor, limit: int, context: TestContext
    ) -> _Signal:
        slot = _ResultSlot()

        def work() -> None:
            try:
                signal = run_guarded(test.name, test.body, context)
            except BaseException as e:
                signal = _Signal(
                    Completion.UNCAUGHT_OTHER,
                    f"Unexpected error in {test.name}: {type(e).__name__}: {e}",
                )
            slot.put(signal)

        worker = threading.Thread(
            target=work, name=f"unitlite-{test.name}", daemon=True
        )
        worker.start()

        signal = slot.wait(limit / 1000.0)
        if signal is None:
            logger.warning(
                f"Test {test.name} exceeded {limit}ms; abandoning its worker"
            )
            return _Signal(
                Completion.TIMED_OUT,
                f"Test {number} - {test.name} still running after "
                f"{limit} milliseconds - possible infinite loop?",
            )
        return signal

    def _outcome(
        self,
        number: int,
        test: TestDescriptor,
        signal: _Signal,
        limit: int,
        bounded: bool,
        elapsed_ms: float,
    ) -> TestOutcome:
        expect_to_fail = self.state.expect_to_fail
        outcome = classify(signal.completion, expect_to_fail)

        diagnostic = None
        note = None
        if outcome is not Outcome.SUCCESS:
            if expect_to_fail:
                diagnostic = (
                    f"Test {number} - {test.name} passed but was expected to fail."
                )
            else:
                diagnostic = signal.detail
        elif signal.completion is not Completion.COMPLETED:
            note = f"Test {number} failed but was expected to fail."

        return TestOutcome(
            number=number,
            name=test.name,
            outcome=outcome,
            completion=signal.completion,
            expected_to_fail=expect_to_fail,
            time_limit_ms=limit,
            bounded=bounded,
            elapsed_ms=elapsed_ms,
            diagnostic=diagnostic,
            note=note,
        )

    def summary(self) -> RunSummary:
        state = self.state
        return RunSummary(
            succeeded=state.success_count,
            failed=state.failure_count,
            errored=state.error_count,
            failed_tests=list(state.failed_tests),
            outcomes=list(state.outcomes),
            warnings=list(self.warnings),
            elapsed_ms=compute_stats([o.elapsed_ms for o in state.outcomes]),
        )
