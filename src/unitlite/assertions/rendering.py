"""Rendering of arbitrary values for assertion diagnostics.

Rendering is only used to build explanations, never to decide equality.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sized
from functools import singledispatch
from itertools import islice
from typing import Any

CONTAINER_DISPLAY_LIMIT = 10

UNPRINTABLE = "???"

# Builtin collections have a repr, but they are rendered element by element
# so that nested strings, pairs and booleans follow the same rules.
_COLLECTION_TYPES = (list, set, frozenset, deque, range)


def get_string_repr(value: Any) -> str:
    """Render ``value`` for a diagnostic message. Never raises."""
    try:
        return _render(value)
    except Exception:
        return UNPRINTABLE


def _has_own_text(value: Any) -> bool:
    for klass in type(value).__mro__:
        if "__str__" in vars(klass) or "__repr__" in vars(klass):
            return klass is not object
    return False


def _render_items(items: Iterable[Any], size: int | None = None) -> str:
    """Render at most CONTAINER_DISPLAY_LIMIT elements.

    The number of omitted elements is reported only when ``size`` is known;
    an unsized iterable is never read past the first omitted element.
    """
    head = list(islice(iter(items), CONTAINER_DISPLAY_LIMIT + 1))
    shown = [get_string_repr(item) for item in head[:CONTAINER_DISPLAY_LIMIT]]
    text = "[" + ", ".join(shown)
    if size is not None and size > CONTAINER_DISPLAY_LIMIT:
        text += f", ... ({size - CONTAINER_DISPLAY_LIMIT} additional elements)"
    elif size is None and len(head) > CONTAINER_DISPLAY_LIMIT:
        text += ", ..."
    return text + "]"


def _size(value: Any) -> int | None:
    return len(value) if isinstance(value, Sized) else None


@singledispatch
def _render(value: Any) -> str:
    if isinstance(value, Iterable) and not isinstance(value, Iterator):
        if isinstance(value, _COLLECTION_TYPES) or not _has_own_text(value):
            return _render_items(value, _size(value))
    if _has_own_text(value):
        return str(value)
    return UNPRINTABLE


@_render.register
def _(value: str) -> str:
    # A one-character string plays the role of a character
    if len(value) == 1:
        return f"'{value}'"
    return f'"{value}"'


@_render.register
def _(value: bool) -> str:
    return "true" if value else "false"


@_render.register
def _(value: tuple) -> str:
    return "<" + ", ".join(get_string_repr(v) for v in value) + ">"


@_render.register
def _(value: Mapping) -> str:
    return _render_items((tuple(item) for item in value.items()), len(value))
