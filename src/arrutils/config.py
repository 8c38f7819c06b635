"""Configuration loading and validation."""

from __future__ import annotations

import copy
import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arrutils import paths
from arrutils.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "Settings", "PathSettings", "ConversionSettings"]

logger = logging.getLogger(__name__)


class PathSettings(BaseModel):
    """Settings for dot-notation path access."""

    model_config = ConfigDict(extra="forbid")

    delimiter: str = Field(default=paths.DEFAULT_DELIMITER, min_length=1)


class ConversionSettings(BaseModel):
    """Defaults for ``to_string``."""

    model_config = ConfigDict(extra="forbid")

    delimiter: str = ","
    wrapper: str = ""
    trim: bool = True


class Settings(BaseModel):
    """Recognized settings. Unknown top-level sections are kept as-is."""

    model_config = ConfigDict(extra="allow")

    paths: PathSettings = Field(default_factory=PathSettings)
    conversion: ConversionSettings = Field(default_factory=ConversionSettings)


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _validate(data or {})

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config built from the file contents merged over defaults.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or fails validation.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        logger.debug("Loaded configuration from %s (%d top-level keys)", yaml_path, len(data))
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        return paths.get(self._data, key, default)

    def has(self, key: str) -> bool:
        return paths.has(self._data, key)

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the validated settings."""
        return copy.deepcopy(self._data)

    @property
    def path_delimiter(self) -> str:
        return self.get("paths.delimiter", paths.DEFAULT_DELIMITER)


def _validate(data: dict[str, Any]) -> dict[str, Any]:
    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
            cause=e,
        ) from e
    return settings.model_dump()
