"""Detect whether an interactive debugger is attached to this process."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

_DEBUGGER_MODULES = ("bdb", "pdb", "pydevd", "_pydevd", "debugpy", "pudb")


def _traced_by_debugger() -> bool:
    tracer = sys.gettrace()
    if tracer is None:
        return False
    module = getattr(tracer, "__module__", None) or type(tracer).__module__
    return module.split(".")[0] in _DEBUGGER_MODULES


def _tracer_pid(status_file: Path) -> int:
    try:
        lines = status_file.read_text().splitlines()
    except OSError:
        return 0
    for line in lines:
        if line.lower().startswith("tracerpid"):
            parts = line.split()
            if len(parts) > 1 and parts[1].isdigit():
                return int(parts[1])
    return 0


def debugger_is_running(status_file: Path | None = None) -> bool:
    """True if a Python debugger is tracing this thread or a native tracer
    (gdb, strace) is attached according to /proc/<pid>/status."""
    if status_file is None:
        status_file = Path(f"/proc/{os.getpid()}/status")
    detected = _traced_by_debugger() or _tracer_pid(status_file) > 0
    if detected:
        logger.info("*Debugger detected -- test time limits will be ignored.")
    return detected
