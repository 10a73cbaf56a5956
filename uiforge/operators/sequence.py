# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Sequence helpers: neighbour lookup, safe access, grouping and pairing.

Nothing here mutates its input except remove_by_id(), and nothing raises
for "not found": absent results are returned as None.

Neighbour lookup
----------------
next_match() returns the element after the first one satisfying the
predicate. When there is no such element (the match is the last element,
nothing matched, or the sequence is empty) it falls back to the sequence
with its last element dropped: the first element of that when
``loop_through`` is set, otherwise its last element, which is the
second-to-last element of the whole sequence.

prev_match() mirrors it: the element before the first match, where
"nothing matched" counts as a match just past the end. Its fallback drops
the first element instead and takes the last element when
``loop_through`` is set, the first otherwise.

The two are not exact mirrors when nothing matches. For a one-element
sequence next_match() finds no neighbour and returns None, while
prev_match() treats the sole element as the one before the end and
returns it:

    next_match([7], lambda x: False)  -> None
    prev_match([7], lambda x: False)  -> 7

This is not a plain circular wrap and callers rely on it as is.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def element_id(element: Any) -> Any:
    """Identity key of ``element``: its ``id`` attribute, or the element."""
    return getattr(element, "id", element)


def _first_index(sequence: Sequence[T], predicate: Callable[[T], bool]) -> Optional[int]:
    for i, element in enumerate(sequence):
        if predicate(element):
            return i
    return None


def safe_get(sequence: Sequence[T], index: Optional[int]) -> Optional[T]:
    """``sequence[index]`` when index is within ``0..len-1``, else None."""
    if index is None or not 0 <= index < len(sequence):
        return None
    return sequence[index]


# ---------------------------------------------------------------------------
# Neighbour lookup
# ---------------------------------------------------------------------------

def next_match(sequence: Sequence[T], predicate: Callable[[T], bool],
               loop_through: bool = False) -> Optional[T]:
    index = _first_index(sequence, predicate)
    if index is not None and index + 1 < len(sequence):
        return sequence[index + 1]

    # fall back to the sequence without its last element
    if len(sequence) < 2:
        return None
    return sequence[0] if loop_through else sequence[-2]


def prev_match(sequence: Sequence[T], predicate: Callable[[T], bool],
               loop_through: bool = False) -> Optional[T]:
    index = _first_index(sequence, predicate)
    if index is None:
        index = len(sequence)
    if 0 <= index - 1 < len(sequence):
        return sequence[index - 1]

    # fall back to the sequence without its first element
    if len(sequence) < 2:
        return None
    return sequence[-1] if loop_through else sequence[1]


def next_of(sequence: Sequence[T], element: T, loop_through: bool = False,
            key: Callable[[T], Any] = element_id) -> Optional[T]:
    """next_match() for the element whose key equals ``key(element)``."""
    target = key(element)
    return next_match(sequence, lambda el: key(el) == target, loop_through)


def prev_of(sequence: Sequence[T], element: T, loop_through: bool = False,
            key: Callable[[T], Any] = element_id) -> Optional[T]:
    """prev_match() for the element whose key equals ``key(element)``."""
    target = key(element)
    return prev_match(sequence, lambda el: key(el) == target, loop_through)


# ---------------------------------------------------------------------------
# Identity access
# ---------------------------------------------------------------------------

def find_by_id(sequence: Iterable[T], id: Any,
               key: Callable[[T], Any] = element_id) -> Optional[T]:
    if id is None:
        return None
    for element in sequence:
        if key(element) == id:
            return element
    return None


def remove_by_id(items: list[T], id: Any,
                 key: Callable[[T], Any] = element_id) -> None:
    """Remove the first element of ``items`` whose key equals ``id``, in place."""
    index = _first_index(items, lambda el: key(el) == id)
    if index is not None:
        del items[index]


def only(sequence: Sequence[T]) -> Optional[T]:
    return sequence[0] if len(sequence) == 1 else None


# ---------------------------------------------------------------------------
# Counting and grouping
# ---------------------------------------------------------------------------

def unique(iterable: Iterable[Hashable]) -> list:
    """Elements of ``iterable`` without repeats, in first-seen order."""
    seen = set()
    result = []
    for element in iterable:
        if element not in seen:
            seen.add(element)
            result.append(element)
    return result


def histogram(iterable: Iterable[Hashable]) -> dict:
    return dict(Counter(iterable))


def compact_group(sequence: Iterable[T], key: Callable[[T], Optional[K]]) -> list[tuple[K, list[T]]]:
    """
    Group elements by ``key``, skipping elements whose key is None.

    Groups come back as ``(key, elements)`` pairs in the order each key is
    first seen. Keys are compared with ``==`` only, so they need not be
    hashable.
    """
    result: list[tuple[K, list[T]]] = []
    for element in sequence:
        k = key(element)
        if k is None:
            continue
        for group_key, members in result:
            if group_key == k:
                members.append(element)
                break
        else:
            result.append((k, [element]))
    return result


def group(sequence: Iterable[T], key: Callable[[T], K]) -> list[tuple[K, list[T]]]:
    return compact_group(sequence, key)


# ---------------------------------------------------------------------------
# Pairing
# ---------------------------------------------------------------------------

def paired(sequence: Sequence[T]) -> list[tuple[T, T]]:
    return [(sequence[i], sequence[i + 1]) for i in range(len(sequence) - 1)]


def paired_with_previous(sequence: Sequence[T]) -> list[tuple[Optional[T], T]]:
    if not sequence:
        return []
    return [(None, sequence[0])] + paired(sequence)


def paired_with_next(sequence: Sequence[T]) -> list[tuple[T, Optional[T]]]:
    if not sequence:
        return []
    return paired(sequence) + [(sequence[-1], None)]


def for_each_pair(sequence: Sequence[T], action: Callable[[T, T], None]) -> None:
    for first, second in paired(sequence):
        action(first, second)


def for_each_with_previous(sequence: Sequence[T],
                           action: Callable[[Optional[T], T], None]) -> None:
    for prev, element in paired_with_previous(sequence):
        action(prev, element)


def for_each_with_next(sequence: Sequence[T],
                       action: Callable[[T, Optional[T]], None]) -> None:
    for element, following in paired_with_next(sequence):
        action(element, following)
