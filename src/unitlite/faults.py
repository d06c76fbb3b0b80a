"""Best-effort containment of illegal-arithmetic and illegal-memory faults.

The interpreter already turns most such conditions into exceptions. Those are
identified here by the signal name a native program would have received.
numpy floating point errors are promoted to exceptions while a body runs. A
genuine crash of the interpreter cannot be contained; faulthandler is enabled
so that it at least leaves a traceback behind.
"""

from __future__ import annotations

import faulthandler
import io
import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import numpy as np

logger = logging.getLogger(__name__)

ARITHMETIC_FAULT = "SIGFPE"
MEMORY_FAULT = "SIGSEGV"


def fault_identifier(exc: BaseException) -> str | None:
    """The condition identifier for a contained fault, or None if ``exc`` is not one."""
    if isinstance(exc, ArithmeticError):
        return ARITHMETIC_FAULT
    if isinstance(exc, (MemoryError, RecursionError)):
        return MEMORY_FAULT
    return None


def install_fault_handlers() -> None:
    """(Re-)enable the crash traceback dump. Called before every test."""
    try:
        faulthandler.enable(file=sys.__stderr__ or sys.stderr, all_threads=True)
    except (AttributeError, ValueError, io.UnsupportedOperation) as e:
        logger.debug(f"faulthandler unavailable: {e}")


@contextmanager
def contained() -> Iterator[None]:
    """Scope in which numpy floating point errors raise FloatingPointError."""
    with np.errstate(all="raise"):
        yield
