"""Pytest configuration and fixtures."""

import io
import logging
import threading

import pytest

from unitlite.registry import Registry
from unitlite.reporting.tap import TapReporter
from unitlite.runner import Runner


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up unitlite loggers after each test to prevent handler leaks."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name == "unitlite" or name.startswith("unitlite."):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
    logging.getLogger("unitlite").disabled = False


@pytest.fixture
def registry():
    return Registry(default_time_limit_ms=500)


@pytest.fixture
def release():
    """Event that lets hanging test bodies exit once the test is over."""
    event = threading.Event()
    yield event
    event.set()


@pytest.fixture
def tap_output():
    return io.StringIO()


@pytest.fixture
def make_runner(registry, tap_output):
    """Build a Runner over the shared registry that writes TAP to tap_output."""

    def _make(debugger_attached: bool = False, **kwargs) -> Runner:
        return Runner(
            registry,
            reporter=TapReporter(tap_output),
            debugger_check=lambda: debugger_attached,
            **kwargs,
        )

    return _make
