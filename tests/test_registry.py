"""Tests for test registration and selection."""

import logging

import pytest

from unitlite.errors import ConfigurationError
from unitlite.registry import Registry, acronym


def _noop():
    pass


def _other():
    pass


@pytest.fixture
def populated(registry):
    for name in ["testConstructor", "testIncrement", "longTest"]:
        registry.register(name, 500, _noop)
    return registry


def test_register_stores_descriptor(registry):
    descriptor = registry.register("testA", 100, _noop)
    assert descriptor is not None
    assert registry["testA"] is descriptor
    assert descriptor.limit(500) == 100
    assert "testA" in registry
    assert len(registry) == 1


def test_explicit_limit_overrides_run_default(registry):
    assert registry.register("testA", 0, _noop).limit(500) == 0
    assert registry.register("testB", -1, _noop).limit(500) == -1


def test_duplicate_is_rejected_and_first_kept(registry, caplog):
    registry.register("testA", 100, _noop)
    with caplog.at_level(logging.ERROR, logger="unitlite"):
        assert registry.register("testA", 200, _other) is None
    assert registry["testA"].body is _noop
    assert registry["testA"].time_limit_ms == 100
    assert len(registry) == 1
    assert "duplicate unit test named testA" in caplog.text


def test_strict_registry_raises_on_duplicate():
    registry = Registry(strict=True)
    registry.register("testA", 100, _noop)
    with pytest.raises(ConfigurationError):
        registry.register("testA", 100, _other)


def test_decorator_bare_defers_to_run_default(registry):
    @registry.unit_test
    def testPlain():
        pass

    assert registry["testPlain"].time_limit_ms is None
    assert registry["testPlain"].limit(50) == 50
    assert registry["testPlain"].body is testPlain


def test_decorator_with_arguments(registry):
    @registry.unit_test(name="renamed", time_limit_ms=0)
    def testOriginal():
        pass

    assert "renamed" in registry
    assert "testOriginal" not in registry
    assert registry["renamed"].time_limit_ms == 0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("testConstructor", "tC"),
        ("longTest", "lT"),
        ("checkAllPaths", "cAP"),
        ("x", "x"),
        ("", ""),
    ],
)
def test_acronym(name, expected):
    assert acronym(name) == expected


def test_select_without_tokens_returns_all_sorted(populated):
    selection = populated.select([])
    assert selection.names == ["longTest", "testConstructor", "testIncrement"]
    assert selection.warnings == []


def test_select_by_substring(populated):
    assert populated.select(["Incr"]).names == ["testIncrement"]
    assert populated.select(["est"]).names == [
        "longTest",
        "testConstructor",
        "testIncrement",
    ]


def test_select_by_acronym(populated):
    assert populated.select(["lT"]).names == ["longTest"]


def test_select_union_of_tokens(populated):
    assert populated.select(["lT", "Incr"]).names == ["longTest", "testIncrement"]


def test_unmatched_token_warns(populated):
    selection = populated.select(["Incr", "zzz"])
    assert selection.names == ["testIncrement"]
    assert selection.warnings == [
        "No matching test found for input specification zzz"
    ]


def test_nothing_matched_runs_everything(populated):
    selection = populated.select(["zzz"])
    assert selection.names == ["longTest", "testConstructor", "testIncrement"]
    assert len(selection.warnings) == 1
