"""Sorting helpers for flat lists, mappings and lists of rows."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from arrutils import paths
from arrutils.errors import InvalidInputError
from arrutils.selection import values_of
from arrutils.types import MISSING

__all__ = [
    "absint",
    "sort_numeric",
    "sort_alphabetic",
    "sort_by_key",
    "sort_by_column",
]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def absint(value: Any) -> int:
    """Coerce ``value`` to a non-negative integer.

    Numbers are truncated, text uses its leading integer (``"12px"`` -> 12)
    and anything else becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return abs(int(value))
    if isinstance(value, (str, bytes)):
        text = value.decode(errors="ignore") if isinstance(value, bytes) else value
        match = _LEADING_INT.match(text)
        return abs(int(match.group(1))) if match else 0
    return 0


def sort_numeric(items: Mapping[Any, Any] | Iterable[Any], descending: bool = False) -> list[int]:
    """Sort values as non-negative integers, dropping those that coerce to 0."""
    numbers = [n for n in (absint(v) for v in values_of(items)) if n]
    return sorted(numbers, reverse=descending)


def sort_alphabetic(
    items: Mapping[Any, Any] | Iterable[Any],
    descending: bool = False,
    key: Callable[[Any], Any] | None = None,
) -> list[Any]:
    """Sort values and return them as a list."""
    return sorted(values_of(items), key=key, reverse=descending)


def sort_by_key(
    mapping: Mapping[Any, Any],
    descending: bool = False,
    key: Callable[[Any], Any] | None = None,
) -> dict[Any, Any]:
    """Return a new dict with entries ordered by key."""
    ordered = sorted(mapping, key=key, reverse=descending)
    return {k: mapping[k] for k in ordered}


def sort_by_column(
    rows: Sequence[Mapping[str, Any]],
    column: str,
    descending: bool = False,
) -> list[Mapping[str, Any]]:
    """Sort rows by the value at ``column``, which may be a dot-notation path.

    Rows holding ``None`` sort before all others (after them when descending).

    Raises:
        InvalidInputError: If a row has no value at ``column``, or the column
            mixes values that cannot be compared.
    """
    keyed = []
    for index, row in enumerate(rows):
        value = paths.get(row, column, MISSING)
        if value is MISSING:
            raise InvalidInputError(
                f"Row {index} has no column '{column}'",
                details={"row": index, "column": column},
            )
        keyed.append((value, row))
    try:
        keyed.sort(key=lambda pair: (pair[0] is not None, pair[0]), reverse=descending)
    except TypeError as e:
        raise InvalidInputError(
            f"Column '{column}' holds values that cannot be compared",
            details={"column": column},
            cause=e,
        ) from e
    return [row for _, row in keyed]
