"""Tests for Config loading and dot-path access."""

from __future__ import annotations

import logging
from typing import Callable

import pytest

from arrutils.config import Config
from arrutils.errors import ConfigError, ConfigNotFoundError, ErrorCodes


class TestConfigDefaults:
    def test_defaults_applied(self) -> None:
        config = Config()
        assert config.get("paths.delimiter") == "."
        assert config.get("conversion.delimiter") == ","
        assert config.get("conversion.wrapper") == ""
        assert config.get("conversion.trim") is True
        assert config.path_delimiter == "."

    def test_missing_key_returns_default(self) -> None:
        assert Config().get("nope.nothing", 42) == 42

    def test_unknown_sections_preserved(self) -> None:
        config = Config({"app": {"name": "demo", "limits": {"max": 3}}})
        assert config.get("app.limits.max") == 3
        assert config.has("app.name") is True
        assert config.has("app.other") is False

    def test_to_dict_is_a_copy(self) -> None:
        config = Config({"app": {"name": "demo"}})
        data = config.to_dict()
        data["app"]["name"] = "changed"
        assert config.get("app.name") == "demo"


class TestConfigValidation:
    def test_empty_path_delimiter_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Config({"paths": {"delimiter": ""}})
        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert exc_info.value.details["errors"]

    def test_unknown_path_setting_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Config({"paths": {"separator": "/"}})

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Config({"conversion": {"trim": "sometimes"}})


class TestConfigLoad:
    def test_load_yaml(self, write_yaml: Callable[..., str]) -> None:
        path = write_yaml(
            """
paths:
  delimiter: "/"
conversion:
  delimiter: "; "
app:
  name: demo
"""
        )
        config = Config.load(path)
        assert config.path_delimiter == "/"
        assert config.get("conversion.delimiter") == "; "
        assert config.get("conversion.trim") is True
        assert config.get("app.name") == "demo"

    def test_load_empty_file(self, write_yaml: Callable[..., str]) -> None:
        config = Config.load(write_yaml(""))
        assert config.path_delimiter == "."

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigNotFoundError):
            Config.load(str(tmp_path / "absent.yaml"))

    def test_invalid_yaml(self, write_yaml: Callable[..., str]) -> None:
        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config.load(write_yaml("paths: [unclosed"))

    def test_non_mapping_document(self, write_yaml: Callable[..., str]) -> None:
        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.load(write_yaml("- a\n- b\n"))

    def test_load_logs_debug(self, write_yaml: Callable[..., str], caplog: pytest.LogCaptureFixture) -> None:
        path = write_yaml("app: {}\n")
        with caplog.at_level(logging.DEBUG, logger="arrutils.config"):
            Config.load(path)
        assert "Loaded configuration" in caplog.text
