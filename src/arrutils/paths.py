"""Dot-notation path access over nested mappings.

A path such as ``"db.primary.host"`` is split on a delimiter into segments
and walked one mapping level at a time::

    from arrutils import paths

    settings = paths.set({}, "db.primary.host", "localhost")
    paths.get(settings, "db.primary.host")        # "localhost"
    paths.has(settings, "db.primary")             # True
    paths.get(settings, "db.replica.host", "-")   # "-"

Reads never raise for missing segments or non-mapping values along the way;
they fall back to the default (``get``) or ``False`` (``has``). Writes replace
any non-mapping value in their way with a fresh mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from arrutils.errors import InvalidInputError
from arrutils.types import MISSING, Lookup, ValueKind

if TYPE_CHECKING:
    from arrutils.config import Config

__all__ = [
    "DEFAULT_DELIMITER",
    "PathAccessor",
    "split_path",
    "get",
    "set",
    "has",
    "get_first",
    "lookup",
    "first_lookup",
]

DEFAULT_DELIMITER = "."

_logger = logging.getLogger(__name__)


def split_path(path: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split ``path`` into segments.

    A path without the delimiter is a single segment; the empty path is the
    single segment ``""``.

    Raises:
        InvalidInputError: If ``delimiter`` is empty.
    """
    if not isinstance(delimiter, str) or not delimiter:
        raise InvalidInputError(
            "Path delimiter must be a non-empty string",
            details={"delimiter": delimiter},
        )
    return path.split(delimiter)


def _walk(node: Any, segments: list[str]) -> Lookup:
    current = node
    for segment in segments:
        if ValueKind.of(current) is not ValueKind.MAPPING or segment not in current:
            return Lookup.absent()
        current = current[segment]
    return Lookup.present(current)


def lookup(mapping: Mapping[Any, Any], path: str, *, delimiter: str = DEFAULT_DELIMITER) -> Lookup:
    """Resolve ``path`` and report whether it was present.

    A top-level key equal to the whole ``path`` wins over the nested walk, so
    keys that themselves contain the delimiter stay reachable. The
    shortcut applies even when that key holds ``None``, unlike an
    ``isset``-style check that treats a stored null as absent.
    """
    segments = split_path(path, delimiter)
    if isinstance(mapping, Mapping) and path in mapping:
        return Lookup.present(mapping[path])
    return _walk(mapping, segments)


def get(
    mapping: Mapping[Any, Any],
    path: str,
    default: Any = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Any:
    """Get a value using dot notation, or ``default`` if the path is absent."""
    return lookup(mapping, path, delimiter=delimiter).unwrap_or(default)


def has(mapping: Mapping[Any, Any], path: str, *, delimiter: str = DEFAULT_DELIMITER) -> bool:
    """Check whether ``path`` exists. A stored ``None`` still counts as present."""
    return lookup(mapping, path, delimiter=delimiter).found


def set(
    mapping: Mapping[Any, Any],
    path: str,
    value: Any,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> dict[Any, Any]:
    """Return a copy of ``mapping`` with ``value`` stored at ``path``.

    The path is always split, so a literal top-level key containing the
    delimiter cannot be targeted. Every mapping along the path is shallowly
    copied into a new ``dict``; branches off the path are shared with the
    input, which is never modified. Missing segments become new mappings and
    non-mapping values in the way are discarded.
    """
    segments = split_path(path, delimiter)
    root = _copy_level(mapping, path)
    current = root
    for segment in segments[:-1]:
        child = _copy_level(current.get(segment, MISSING), path)
        current[segment] = child
        current = child
    current[segments[-1]] = value
    return root


def _copy_level(node: Any, path: str) -> dict[Any, Any]:
    if ValueKind.of(node) is ValueKind.MAPPING:
        return dict(node)
    if node is not MISSING:
        _logger.debug(
            "Replacing %s value with a mapping while setting '%s'",
            type(node).__name__,
            path,
        )
    return {}


def get_first(
    mapping: Mapping[Any, Any],
    keys: Iterable[str],
    default: Any = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Any:
    """Return the first non-``None`` value among candidate paths.

    A path that holds ``None`` is skipped just like a missing one. Use
    ``first_lookup`` when a stored ``None`` must be returned.
    """
    for key in keys:
        value = get(mapping, key, delimiter=delimiter)
        if value is not None:
            return value
    return default


def first_lookup(
    mapping: Mapping[Any, Any],
    keys: Iterable[str],
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Lookup:
    """Return the lookup of the first candidate path that is present."""
    for key in keys:
        result = lookup(mapping, key, delimiter=delimiter)
        if result.found:
            return result
    return Lookup.absent()


class PathAccessor:
    """Path operations bound to a fixed delimiter.

    Useful when data uses a separator other than ``"."``::

        accessor = PathAccessor(delimiter="/")
        accessor.get({"a": {"b": 1}}, "a/b")  # 1
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        split_path("", delimiter)
        self._delimiter = delimiter

    @classmethod
    def from_config(cls, config: Config) -> PathAccessor:
        """Create an accessor using the ``paths.delimiter`` setting."""
        return cls(delimiter=config.get("paths.delimiter", DEFAULT_DELIMITER))

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def split(self, path: str) -> list[str]:
        return split_path(path, self._delimiter)

    def get(self, mapping: Mapping[Any, Any], path: str, default: Any = None) -> Any:
        return get(mapping, path, default, delimiter=self._delimiter)

    def set(self, mapping: Mapping[Any, Any], path: str, value: Any) -> dict[Any, Any]:
        return set(mapping, path, value, delimiter=self._delimiter)

    def has(self, mapping: Mapping[Any, Any], path: str) -> bool:
        return has(mapping, path, delimiter=self._delimiter)

    def get_first(self, mapping: Mapping[Any, Any], keys: Iterable[str], default: Any = None) -> Any:
        return get_first(mapping, keys, default, delimiter=self._delimiter)

    def lookup(self, mapping: Mapping[Any, Any], path: str) -> Lookup:
        return lookup(mapping, path, delimiter=self._delimiter)

    def first_lookup(self, mapping: Mapping[Any, Any], keys: Iterable[str]) -> Lookup:
        return first_lookup(mapping, keys, delimiter=self._delimiter)

    def __repr__(self) -> str:
        return f"PathAccessor(delimiter={self._delimiter!r})"
