"""Shared value types: the MISSING sentinel, Lookup results and ValueKind."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "MISSING",
    "Lookup",
    "ValueKind",
]


class _Missing:
    """Marker type for an absent value. Use the ``MISSING`` singleton."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Missing:
        return self


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Lookup:
    """Result of a path lookup that keeps "absent" apart from a stored ``None``."""

    found: bool
    value: Any = MISSING

    @classmethod
    def absent(cls) -> Lookup:
        return cls(found=False, value=MISSING)

    @classmethod
    def present(cls, value: Any) -> Lookup:
        return cls(found=True, value=value)

    def unwrap_or(self, default: Any = None) -> Any:
        """Return the value when found, otherwise ``default``."""
        return self.value if self.found else default

    def __bool__(self) -> bool:
        return self.found


class ValueKind(str, Enum):
    """Shape of a value as seen by traversal helpers."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        """Classify ``value``. Strings and bytes are scalars, not sequences."""
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, (str, bytes, bytearray)):
            return cls.SCALAR
        if isinstance(value, (Sequence, set, frozenset)):
            return cls.SEQUENCE
        return cls.SCALAR
