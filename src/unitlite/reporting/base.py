"""Reporter interface: consumes the runner's outcome stream."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from unitlite.metrics import RunSummary
    from unitlite.runner import TestOutcome


class Reporter:
    """Receives run events. The base class ignores them all."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved late so that a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, text: str) -> None:
        """Write ``text`` as one or more whole lines."""
        if not text:
            return
        self.stream.write(text if text.endswith("\n") else text + "\n")
        self.stream.flush()

    def start(self, total: int, warnings: list[str]) -> None:
        pass

    def test_started(self, number: int, name: str) -> None:
        pass

    def test_finished(self, result: TestOutcome) -> None:
        pass

    def finish(self, summary: RunSummary) -> None:
        pass
