"""Membership comparison between two collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from arrutils.selection import values_of

__all__ = ["has_matches", "has_all_matches", "has_any_matches"]


def _matches(first: Mapping[Any, Any] | Iterable[Any], second: Mapping[Any, Any] | Iterable[Any]) -> tuple[int, int]:
    candidates = list(values_of(first))
    pool = list(values_of(second))
    matched = sum(1 for item in candidates if item in pool)
    return matched, len(candidates)


def has_matches(
    first: Mapping[Any, Any] | Iterable[Any],
    second: Mapping[Any, Any] | Iterable[Any],
    match_all: bool = True,
) -> bool:
    """Check whether elements of ``first`` occur in ``second``.

    Args:
        first: Elements to look for.
        second: Elements to look in.
        match_all: Require every element of ``first`` to match (default) or
            just one of them.
    """
    matched, total = _matches(first, second)
    if match_all:
        return matched == total
    return matched > 0


def has_all_matches(first: Mapping[Any, Any] | Iterable[Any], second: Mapping[Any, Any] | Iterable[Any]) -> bool:
    return has_matches(first, second, match_all=True)


def has_any_matches(first: Mapping[Any, Any] | Iterable[Any], second: Mapping[Any, Any] | Iterable[Any]) -> bool:
    return has_matches(first, second, match_all=False)
