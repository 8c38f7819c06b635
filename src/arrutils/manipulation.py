"""Positional insertion and shuffling."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from typing import Any

from arrutils.selection import values_of

__all__ = ["insert_after", "insert_before", "shuffle"]


def _splice(mapping: Mapping[Any, Any], position: int, new: Mapping[Any, Any]) -> dict[Any, Any]:
    # Leftmost wins on key collisions: head, then ``new``, then tail.
    entries = list(mapping.items())
    result = dict(entries[:position])
    for k, v in new.items():
        if k not in result:
            result[k] = v
    for k, v in entries[position:]:
        if k not in result:
            result[k] = v
    return result


def insert_after(mapping: Mapping[Any, Any], key: Any, new: Mapping[Any, Any]) -> dict[Any, Any]:
    """Insert the entries of ``new`` right after ``key``, or at the end if ``key`` is absent."""
    keys = list(mapping)
    position = keys.index(key) + 1 if key in mapping else len(keys)
    return _splice(mapping, position, new)


def insert_before(mapping: Mapping[Any, Any], key: Any, new: Mapping[Any, Any]) -> dict[Any, Any]:
    """Insert the entries of ``new`` right before ``key``, or at the start if ``key`` is absent."""
    position = list(mapping).index(key) if key in mapping else 0
    return _splice(mapping, position, new)


def shuffle(items: Mapping[Any, Any] | Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return the values in random order. The input is left untouched."""
    shuffled = list(values_of(items))
    (rng or random).shuffle(shuffled)
    return shuffled
