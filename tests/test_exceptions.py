# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
==========================
Tests for the pwmeter hierarchical exception system.
All pure Python.
"""
import pytest

from pwmeter.exceptions import (
    ComparisonError,
    ConfigurationError,
    InvalidOptionError,
    InvalidStrengthScaleError,
    PasswordMeterError,
)


# ── inheritance hierarchy ─────────────────────────────────────────────────────

class TestInheritance:

    def test_all_inherit_from_root(self):
        for err_cls in (ConfigurationError, InvalidStrengthScaleError,
                        InvalidOptionError, ComparisonError):
            assert issubclass(err_cls, PasswordMeterError), f"{err_cls} must inherit PasswordMeterError"

    def test_scale_error_is_configuration_error(self):
        assert issubclass(InvalidStrengthScaleError, ConfigurationError)


# ── PasswordMeterError attributes ─────────────────────────────────────────────

class TestPasswordMeterError:

    def test_message_stored(self):
        e = PasswordMeterError("test message")
        assert e.message == "test message"
        assert str(e) == "test message"

    def test_code_and_detail(self):
        e = PasswordMeterError("msg", code="ERR_001", detail="extra info")
        assert e.code == "ERR_001"
        assert str(e) == "msg | extra info"

    def test_catchable_as_exception(self):
        with pytest.raises(Exception):
            raise PasswordMeterError("boom")


# ── specialised errors ────────────────────────────────────────────────────────

class TestSpecialised:

    def test_invalid_scale(self):
        e = InvalidStrengthScaleError("expected 6 thresholds, got 5")
        assert e.code == "INVALID_STRENGTH_SCALE"
        assert e.reason == "expected 6 thresholds, got 5"
        assert "expected 6 thresholds" in str(e)

    def test_invalid_option(self):
        e = InvalidOptionError("min_length", -1, "must not be negative")
        assert e.option == "min_length"
        assert e.value == -1
        assert "min_length" in e.message
        assert "-1" in e.message

    def test_comparison_default_message(self):
        e = ComparisonError()
        assert e.message == "cannot compare against a zero-score baseline"
        assert e.code == "ZERO_BASELINE"

    def test_code_override(self):
        assert ComparisonError(code="CUSTOM").code == "CUSTOM"
