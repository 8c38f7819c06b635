"""Data processing helpers: grouping, plucking and flattening."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from arrutils import paths
from arrutils.selection import values_of
from arrutils.types import ValueKind

__all__ = ["group_by", "pluck", "flatten"]


def group_by(rows: Iterable[Mapping[str, Any]], key: str) -> dict[Any, list[Mapping[str, Any]]]:
    """Group rows by the value at ``key`` (dot notation allowed).

    Groups appear in first-seen order. Rows without ``key`` land under ``None``.
    """
    groups: dict[Any, list[Mapping[str, Any]]] = {}
    for row in rows:
        groups.setdefault(paths.get(row, key), []).append(row)
    return groups


def pluck(items: Mapping[Any, Any] | Iterable[Any], key: Any, default: Any = None) -> list[Any]:
    """Collect ``key`` from every item.

    Mappings are read by key, any other object by attribute.
    """
    plucked = []
    for item in values_of(items):
        if ValueKind.of(item) is ValueKind.MAPPING:
            plucked.append(item.get(key, default))
        else:
            plucked.append(getattr(item, key, default))
    return plucked


def flatten(items: Mapping[Any, Any] | Iterable[Any], unique: bool = False) -> list[Any]:
    """Collect every leaf of a nested structure, depth first.

    Args:
        items: Nested mappings and sequences. Strings are leaves.
        unique: Keep only the first occurrence of each leaf. Leaves of
            different types never collapse, so ``1``, ``1.0`` and ``True``
            all stay.
    """
    flat: list[Any] = []
    _collect(items, flat)
    if not unique:
        return flat

    deduped: list[Any] = []
    seen: set[tuple[type, Any]] = set()
    for leaf in flat:
        marker = (type(leaf), leaf)
        try:
            if marker in seen:
                continue
            seen.add(marker)
        except TypeError:
            if any(type(kept) is type(leaf) and kept == leaf for kept in deduped):
                continue
        deduped.append(leaf)
    return deduped


def _collect(node: Any, out: list[Any]) -> None:
    kind = ValueKind.of(node)
    if kind is ValueKind.SCALAR:
        out.append(node)
        return
    for child in values_of(node):
        _collect(child, out)
