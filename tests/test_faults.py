import numpy as np
import pytest

from unitlite.faults import (
    ARITHMETIC_FAULT,
    MEMORY_FAULT,
    contained,
    fault_identifier,
    install_fault_handlers,
)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ZeroDivisionError("division by zero"), ARITHMETIC_FAULT),
        (OverflowError("too big"), ARITHMETIC_FAULT),
        (FloatingPointError("invalid"), ARITHMETIC_FAULT),
        (MemoryError(), MEMORY_FAULT),
        (RecursionError("maximum recursion depth exceeded"), MEMORY_FAULT),
        (ValueError("nope"), None),
        (KeyError("k"), None),
    ],
)
def test_fault_identifier(exc, expected):
    assert fault_identifier(exc) == expected


def test_contained_promotes_numpy_errors():
    with contained():
        with pytest.raises(FloatingPointError):
            np.array([1.0]) / 0.0


def test_numpy_defaults_restored_after_scope():
    with contained():
        pass
    assert np.geterr()["divide"] != "raise"


def test_install_fault_handlers_is_repeatable():
    install_fault_handlers()
    install_fault_handlers()
