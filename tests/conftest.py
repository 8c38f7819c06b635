"""Shared test fixtures for the arrutils test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest


# === Data Fixtures ===


@pytest.fixture
def nested() -> dict[str, Any]:
    """A nested mapping with scalars, None values and a dotted literal key."""
    return {
        "db": {
            "primary": {"host": "db1.internal", "port": 5432},
            "replica": None,
        },
        "features": ["search", "export"],
        "a.b": "literal",
        "a": {"b": "nested"},
        "": "empty-key",
    }


@pytest.fixture
def people() -> list[dict[str, Any]]:
    """Rows with a flat and a nested column."""
    return [
        {"name": "Carol", "age": 41, "team": "ops", "address": {"city": "Oslo"}},
        {"name": "alice", "age": 29, "team": "dev", "address": {"city": "Bergen"}},
        {"name": "Bob", "age": 35, "team": "dev", "address": {"city": "Aarhus"}},
    ]


# === File Fixtures ===


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str], str]:
    """Factory writing YAML content to a temp file and returning its path."""

    def factory(content: str, name: str = "arrutils.yaml") -> str:
        yaml_file = tmp_path / name
        yaml_file.write_text(content)
        return str(yaml_file)

    return factory
