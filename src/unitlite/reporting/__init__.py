from typing import TextIO

from unitlite.reporting.base import Reporter
from unitlite.reporting.gtest import GTestReporter
from unitlite.reporting.plain import PlainReporter
from unitlite.reporting.tap import TapReporter, msg_comment

_REPORTERS: dict[str, type[Reporter]] = {
    "gtest": GTestReporter,
    "plain": PlainReporter,
    "tap": TapReporter,
}


def get_reporter(
    format_name: str,
    stream: TextIO | None = None,
    diagnostics_before_results: bool = True,
) -> Reporter:
    cls = _REPORTERS.get(format_name)
    if cls is None:
        raise ValueError(
            f"Unknown output format: {format_name!r}. "
            f"Available: {', '.join(sorted(_REPORTERS))}"
        )
    if cls is TapReporter:
        return TapReporter(stream, diagnostics_before_results=diagnostics_before_results)
    return cls(stream)


__all__ = [
    "GTestReporter",
    "PlainReporter",
    "Reporter",
    "TapReporter",
    "get_reporter",
    "msg_comment",
]
