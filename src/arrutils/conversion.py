"""Conversion to delimited strings and to/from value/label option lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from arrutils.selection import values_of
from arrutils.types import ValueKind

if TYPE_CHECKING:
    from arrutils.config import Config

__all__ = ["to_string", "to_options", "from_options"]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def to_string(
    items: Mapping[Any, Any] | Iterable[Any],
    delimiter: str | None = None,
    wrapper: str | None = None,
    trim: bool | None = None,
    *,
    config: Config | None = None,
) -> str:
    """Join values into a delimited string.

    Arguments left as ``None`` come from ``config`` (``conversion.*``) when
    one is given, otherwise ``","``, ``""`` and ``True``.

    Example::

        to_string([" a", "b "], wrapper="'")  # "'a','b'"
    """
    if config is not None:
        delimiter = config.get("conversion.delimiter") if delimiter is None else delimiter
        wrapper = config.get("conversion.wrapper") if wrapper is None else wrapper
        trim = config.get("conversion.trim") if trim is None else trim
    delimiter = "," if delimiter is None else delimiter
    wrapper = "" if wrapper is None else wrapper
    trim = True if trim is None else trim

    parts = []
    for item in values_of(items):
        text = _text(item)
        if trim:
            text = text.strip()
        parts.append(f"{wrapper}{text}{wrapper}")
    return delimiter.join(parts)


def to_options(mapping: Mapping[Any, Any], label_key: str = "") -> list[dict[str, str]]:
    """Convert a key/value mapping to a list of ``{"value", "label"}`` dicts.

    When a value is itself a mapping and ``label_key`` is set, the label is read
    from ``value[label_key]`` and falls back to the key when that is missing
    or ``None``.
    """
    options = []
    for key, value in mapping.items():
        if label_key and ValueKind.of(value) is ValueKind.MAPPING:
            label = value.get(label_key)
            value = key if label is None else label
        options.append({"value": _text(key), "label": _text(value)})
    return options


def from_options(options: Iterable[Mapping[str, Any]]) -> dict[Any, Any]:
    """Convert ``{"value", "label"}`` dicts back to a mapping.

    Entries missing either field, or holding ``None`` in it, are skipped.
    """
    result: dict[Any, Any] = {}
    for option in options:
        value = option.get("value")
        label = option.get("label")
        if value is not None and label is not None:
            result[value] = label
    return result
