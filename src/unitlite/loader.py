"""Locate the Registry of a user's test module."""

from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from unitlite.config import DEFAULT_TIME_LIMIT_MS
from unitlite.registry import Registry

REGISTER_HOOK = "register_tests"

# sys.modules key prefix for test files loaded by path; never the bare stem
MODULE_PREFIX = "unitlite_user_"


def _import(module_ref: str) -> ModuleType:
    path = Path(module_ref)
    if module_ref.endswith(".py") or path.is_file():
        if not path.is_file():
            raise ValueError(f"test module not found: {module_ref}")
        path = path.resolve()
        # let the test module import its siblings
        if str(path.parent) not in sys.path:
            sys.path.append(str(path.parent))
        module_name = MODULE_PREFIX + path.stem
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ValueError(f"cannot import {module_ref}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        return module
    try:
        return importlib.import_module(module_ref)
    except ImportError as e:
        raise ValueError(f"cannot import {module_ref}: {e}") from e


def load_registry(
    target: str, default_time_limit_ms: int | None = None
) -> Registry:
    """Import ``target`` and return its Registry.

    ``target`` is a dotted module name or a path to a ``.py`` file, optionally
    followed by ``:attr`` naming the Registry. Without ``:attr`` the first
    module-level Registry is used; failing that, a ``register_tests(registry)``
    function is called on a fresh Registry.
    """
    module_ref, sep, attr = target.rpartition(":")
    if not sep or not attr.isidentifier():
        module_ref, attr = target, ""

    module = _import(module_ref)

    if attr:
        registry = getattr(module, attr, None)
        if not isinstance(registry, Registry):
            raise ValueError(f"{module_ref}:{attr} is not a unitlite Registry")
        return registry

    for value in vars(module).values():
        if isinstance(value, Registry):
            return value

    hook = getattr(module, REGISTER_HOOK, None)
    if callable(hook):
        if default_time_limit_ms is None:
            default_time_limit_ms = DEFAULT_TIME_LIMIT_MS
        registry = Registry(default_time_limit_ms=default_time_limit_ms)
        hook(registry)
        return registry

    raise ValueError(
        f"{module_ref} defines neither a Registry nor a {REGISTER_HOOK}() function"
    )
