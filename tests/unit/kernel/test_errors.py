"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from optval.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from optval.kernel.errors import (
    BaseError,
    EmptyValueError,
    MissingValueError,
    OptionError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        d = err.to_dict()
        assert d == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause)
        d = err.to_dict()
        assert "cause" in d
        assert "original" in d["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        err = BaseError("hello", code="hi")
        r = repr(err)
        assert "hi" in r
        assert "hello" in r

    def test_equality_by_type_and_payload(self) -> None:
        assert BaseError("a") == BaseError("a")
        assert BaseError("a") != BaseError("b")
        assert MissingValueError("a") != OptionError("a")

    def test_is_exception(self) -> None:
        with pytest.raises(BaseError):
            raise BaseError("boom")


class TestOptionErrors:
    def test_option_error_is_base_error(self) -> None:
        assert issubclass(OptionError, BaseError)

    def test_empty_value_default_message(self) -> None:
        err = EmptyValueError()
        assert err.code == "empty_value"
        assert "unwrap" in err.message
        assert "Absent" in err.message

    def test_empty_value_custom_message(self) -> None:
        assert EmptyValueError("no port configured").message == "no port configured"

    def test_missing_value_keeps_caller_message(self) -> None:
        err = MissingValueError("user id required")
        assert err.message == "user id required"
        assert err.code == "missing_value"

    def test_both_inherit_option_error(self) -> None:
        for cls in (EmptyValueError, MissingValueError):
            assert issubclass(cls, OptionError)


class TestConfigErrors:
    def test_config_error_is_base_error(self) -> None:
        assert issubclass(ConfigError, BaseError)

    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("OPTVAL_LOG_LEVEL")
        assert err.setting_name == "OPTVAL_LOG_LEVEL"
        assert "OPTVAL_LOG_LEVEL" in err.message
        assert err.code == "missing_required_setting"

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("level", "LOUD", "unknown level")
        assert err.value == "LOUD"
        assert err.reason == "unknown level"
        assert err.to_dict()["detail"] == {"setting": "level", "reason": "unknown level"}
