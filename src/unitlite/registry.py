"""Registration and selection of unit tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from unitlite.config import DEFAULT_TIME_LIMIT_MS
from unitlite.errors import ConfigurationError

logger = logging.getLogger(__name__)

TestBody = Callable[[], None]


@dataclass(frozen=True)
class TestDescriptor:
    """A registered test. A ``time_limit_ms`` of None defers to the run's default."""

    __test__ = False

    name: str
    time_limit_ms: int | None
    body: TestBody

    def limit(self, default_ms: int) -> int:
        return default_ms if self.time_limit_ms is None else self.time_limit_ms


@dataclass
class Selection:
    names: list[str]
    warnings: list[str] = field(default_factory=list)


def acronym(name: str) -> str:
    """First character of ``name`` followed by each later uppercase letter."""
    if not name:
        return ""
    return name[0] + "".join(c for c in name[1:] if "A" <= c <= "Z")


class Registry:
    """Maps test names to their time limit and body.

    Populated before any test runs. A second registration under an existing
    name is reported and rejected; the first registration stays in effect.
    """

    def __init__(self, default_time_limit_ms: int = DEFAULT_TIME_LIMIT_MS, strict: bool = False):
        self.default_time_limit_ms = default_time_limit_ms
        self.strict = strict
        self._tests: dict[str, TestDescriptor] = {}

    def __len__(self) -> int:
        return len(self._tests)

    def __contains__(self, name: object) -> bool:
        return name in self._tests

    def __getitem__(self, name: str) -> TestDescriptor:
        return self._tests[name]

    def names(self) -> list[str]:
        return sorted(self._tests)

    def register(
        self, name: str, time_limit_ms: int | None, body: TestBody
    ) -> TestDescriptor | None:
        """Store a test. Returns None when the name was already taken."""
        if name in self._tests:
            error = ConfigurationError(f"duplicate unit test named {name}")
            if self.strict:
                raise error
            logger.error("**Error: %s", error)
            return None
        descriptor = TestDescriptor(name=name, time_limit_ms=time_limit_ms, body=body)
        self._tests[name] = descriptor
        return descriptor

    def unit_test(
        self,
        body: TestBody | None = None,
        *,
        name: str | None = None,
        time_limit_ms: int | None = None,
    ):
        """Decorator registering a function as a test.

        Usable bare (``@registry.unit_test``) or with arguments
        (``@registry.unit_test(time_limit_ms=100)``). A non-positive limit
        disables the time bound for that test; without one the run's default
        limit applies.
        """

        def decorate(fn: TestBody) -> TestBody:
            self.register(name or fn.__name__, time_limit_ms, fn)
            return fn

        if body is not None:
            return decorate(body)
        return decorate

    def select(self, tokens: Iterable[str] = ()) -> Selection:
        """Choose the tests to run for the given selection tokens.

        A token selects every test whose name contains it. A token with no such
        match selects tests whose acronym equals it exactly. When nothing at all
        is selected, every registered test is.
        """
        selected: set[str] = set()
        warnings: list[str] = []
        for token in tokens:
            found = {n for n in self._tests if token in n}
            if not found:
                found = {n for n in self._tests if acronym(n) == token}
            if not found:
                warning = f"No matching test found for input specification {token}"
                logger.warning(warning)
                warnings.append(warning)
            selected |= found
        if not selected:
            selected = set(self._tests)
        return Selection(names=sorted(selected), warnings=warnings)
