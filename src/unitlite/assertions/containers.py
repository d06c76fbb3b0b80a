"""Element lookup shared by the container matchers.

Containers with a native keyed lookup (sets and mappings) are checked with
``in``. Anything else is scanned in iteration order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from itertools import islice
from typing import Any

import numpy as np

NOT_FOUND = -1


def values_equal(left: Any, right: Any) -> bool:
    """``left == right`` as a single bool; numpy arrays compare whole."""
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))
    return bool(left == right)


class IteratorRange(Sequence):
    """An immutable view of ``items[start:stop]`` usable as subject or haystack.

    Any iterable is accepted; one-shot iterators are consumed once, here.
    """

    def __init__(self, items: Iterable[Any], start: int = 0, stop: int | None = None):
        self._items = tuple(islice(items, start, stop))

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)


def range_of(items: Iterable[Any], start: int = 0, stop: int | None = None) -> IteratorRange:
    return IteratorRange(items, start, stop)


def array_of_length(items: Iterable[Any], n: int) -> IteratorRange:
    """The first ``n`` elements of ``items``."""
    return IteratorRange(items, 0, n)


def has_keyed_lookup(container: Any) -> bool:
    return isinstance(container, (Set, Mapping))


def find_in_container(container: Iterable[Any], element: Any) -> int:
    """Return the 0-indexed position of ``element`` in ``container``, or -1."""
    if has_keyed_lookup(container):
        try:
            present = element in container
        except TypeError:
            # unhashable element can never be a key
            return NOT_FOUND
        if not present:
            return NOT_FOUND
        for position, item in enumerate(container):
            if values_equal(item, element):
                return position
        return NOT_FOUND

    if isinstance(container, range):
        try:
            return container.index(element)
        except ValueError:
            return NOT_FOUND

    for position, item in enumerate(container):
        if values_equal(element, item):
            return position
    return NOT_FOUND
