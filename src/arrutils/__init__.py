"""arrutils - helpers for mappings and sequences, with dot-notation path access."""

from __future__ import annotations

# Path access
from arrutils import paths
from arrutils.paths import (
    DEFAULT_DELIMITER,
    PathAccessor,
    first_lookup,
    get_first,
    lookup,
    split_path,
)
from arrutils.paths import get as get_path
from arrutils.paths import has as has_path
from arrutils.paths import set as set_path

# Types
from arrutils.types import MISSING, Lookup, ValueKind

# Config
from arrutils.config import Config

# Errors
from arrutils.errors import (
    ArrUtilsError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
)

# Helpers
from arrutils.selection import contains, except_, first, last, only
from arrutils.sorting import sort_alphabetic, sort_by_column, sort_by_key, sort_numeric
from arrutils.processing import flatten, group_by, pluck
from arrutils.manipulation import insert_after, insert_before, shuffle
from arrutils.comparison import has_all_matches, has_any_matches, has_matches
from arrutils.conversion import from_options, to_options, to_string

__version__ = "1.0.0"

__all__ = [
    # Path access
    "paths",
    "DEFAULT_DELIMITER",
    "PathAccessor",
    "split_path",
    "get_path",
    "set_path",
    "has_path",
    "get_first",
    "lookup",
    "first_lookup",
    # Types
    "MISSING",
    "Lookup",
    "ValueKind",
    # Config
    "Config",
    # Errors
    "ArrUtilsError",
    "ConfigError",
    "ConfigNotFoundError",
    "ErrorCodes",
    "InvalidInputError",
    # Selection
    "first",
    "last",
    "only",
    "except_",
    "contains",
    # Sorting
    "sort_numeric",
    "sort_alphabetic",
    "sort_by_key",
    "sort_by_column",
    # Processing
    "group_by",
    "pluck",
    "flatten",
    # Manipulation
    "insert_after",
    "insert_before",
    "shuffle",
    # Comparison
    "has_matches",
    "has_all_matches",
    "has_any_matches",
    # Conversion
    "to_string",
    "to_options",
    "from_options",
]
