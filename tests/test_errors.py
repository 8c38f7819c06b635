"""Tests for the arrutils error hierarchy."""

from __future__ import annotations

import pytest

from arrutils.errors import (
    ArrUtilsError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
)


class TestArrUtilsError:
    def test_str_includes_code(self) -> None:
        error = ArrUtilsError(code="SOME_CODE", message="went wrong")
        assert str(error) == "[SOME_CODE] went wrong"
        assert error.details == {}
        assert error.cause is None

    def test_stores_cause(self) -> None:
        cause = ValueError("boom")
        error = ConfigError("bad", cause=cause)
        assert error.cause is cause


class TestSubclasses:
    def test_config_not_found(self) -> None:
        error = ConfigNotFoundError(config_path="/tmp/missing.yaml")
        assert error.code == ErrorCodes.CONFIG_NOT_FOUND
        assert error.config_path == "/tmp/missing.yaml"
        assert "/tmp/missing.yaml" in error.message

    def test_config_error(self) -> None:
        assert ConfigError("bad").code == ErrorCodes.CONFIG_INVALID

    def test_invalid_input_default_message(self) -> None:
        error = InvalidInputError()
        assert error.code == ErrorCodes.GENERAL_INVALID_INPUT
        assert error.message == "Invalid input"

    def test_all_share_base(self) -> None:
        for cls in (ConfigError, InvalidInputError):
            assert issubclass(cls, ArrUtilsError)
        assert issubclass(ConfigNotFoundError, ArrUtilsError)


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().CONFIG_INVALID = "OTHER"
