"""Selection helpers: first/last element and key filtering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["first", "last", "only", "except_", "contains", "values_of"]


def values_of(items: Mapping[Any, Any] | Iterable[Any]) -> Iterable[Any]:
    """Iterate the values of a mapping, or the items of any other iterable."""
    if isinstance(items, Mapping):
        return items.values()
    return items


def first(items: Mapping[Any, Any] | Iterable[Any]) -> Any:
    """Return the first value, or ``None`` when ``items`` is empty."""
    return next(iter(values_of(items)), None)


def last(items: Mapping[Any, Any] | Iterable[Any]) -> Any:
    """Return the last value, or ``None`` when ``items`` is empty."""
    values = values_of(items)
    try:
        return next(reversed(values))  # type: ignore[call-overload]
    except StopIteration:
        return None
    except TypeError:
        result = None
        for result in values:
            pass
        return result


def only(mapping: Mapping[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    """Keep only the given keys, in the order they appear in ``mapping``."""
    allowed = list(keys)
    return {k: v for k, v in mapping.items() if k in allowed}


def except_(mapping: Mapping[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    """Drop the given keys."""
    excluded = list(keys)
    return {k: v for k, v in mapping.items() if k not in excluded}


def contains(items: Mapping[Any, Any] | Iterable[Any], needle: Any) -> bool:
    """Check whether ``needle`` is among the values of ``items``."""
    return any(value == needle for value in values_of(items))
