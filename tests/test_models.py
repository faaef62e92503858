# -*- coding: utf-8 -*-
"""
tests/test_models.py
======================
Covers pwmeter/models.py — option parsing and immutability.
"""
import dataclasses

import pytest

from pwmeter.exceptions import InvalidOptionError
from pwmeter.models import (
    CrackTimeOptions,
    ErrorMessages,
    PasswordOptions,
    ScoreResult,
    coerce_options,
)


class TestPasswordOptionsFromDict:

    def test_camel_case_keys(self):
        opts = PasswordOptions.from_dict({
            "minLength": 8,
            "maxLength": 64,
            "uppercaseLettersMinLength": 1,
            "lowercaseLettersMinLength": 2,
            "numbersMinLength": 3,
            "symbolsMinLength": 4,
            "startsWith": "A",
            "endsWith": "z",
            "includeOne": ["!"],
        })
        assert opts.min_length == 8
        assert opts.max_length == 64
        assert opts.uppercase_letters_min_length == 1
        assert opts.lowercase_letters_min_length == 2
        assert opts.numbers_min_length == 3
        assert opts.symbols_min_length == 4
        assert opts.starts_with == "A"
        assert opts.ends_with == "z"
        assert opts.include_one == ("!",)

    def test_snake_case_keys(self):
        assert PasswordOptions.from_dict({"min_length": 8}).min_length == 8

    def test_empty_and_none(self):
        assert PasswordOptions.from_dict({}) == PasswordOptions()
        assert PasswordOptions.from_dict(None) == PasswordOptions()

    def test_unknown_key(self):
        with pytest.raises(InvalidOptionError) as exc:
            PasswordOptions.from_dict({"minimumLength": 8})
        assert exc.value.option == "minimumLength"

    def test_nested_messages(self):
        opts = PasswordOptions.from_dict({"customErrorMessages": {"notEnoughSymbols": "More symbols"}})
        assert opts.custom_error_messages == ErrorMessages(not_enough_symbols="More symbols")

    def test_unknown_message_kind(self):
        with pytest.raises(InvalidOptionError):
            PasswordOptions.from_dict({"customErrorMessages": {"tooWeak": "x"}})


class TestPasswordOptionsNormalisation:

    def test_lists_become_tuples(self):
        opts = PasswordOptions(include=["a", "b"], exclude=[" "])
        assert opts.include == ("a", "b")
        assert opts.exclude == (" ",)

    def test_string_becomes_characters(self):
        assert PasswordOptions(exclude="<>").exclude == ("<", ">")

    def test_non_string_items_rejected(self):
        with pytest.raises(InvalidOptionError):
            PasswordOptions(include=["a", 1])

    def test_non_iterable_rejected(self):
        with pytest.raises(InvalidOptionError):
            PasswordOptions(include=5)

    @pytest.mark.parametrize("field_name,value", [
        ("min_length", "8"),
        ("max_length", 8.0),
        ("uppercase_letters_min_length", True),
        ("numbers_min_length", -1),
        ("symbols_min_length", [1]),
    ])
    def test_count_fields_must_be_non_negative_ints(self, field_name, value):
        with pytest.raises(InvalidOptionError) as exc:
            PasswordOptions(**{field_name: value})
        assert exc.value.option == field_name

    def test_count_fields_from_dict(self):
        with pytest.raises(InvalidOptionError):
            PasswordOptions.from_dict({"minLength": "8"})

    def test_zero_counts_allowed(self):
        assert PasswordOptions(min_length=0, max_length=0).min_length == 0

    def test_frozen(self):
        opts = PasswordOptions(min_length=8)
        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.min_length = 4

    def test_default_messages(self):
        assert PasswordOptions().messages.message_for("empty") == "Password is empty."


class TestCoerceOptions:

    def test_passthrough(self):
        opts = PasswordOptions(min_length=3)
        assert coerce_options(opts) is opts

    def test_none(self):
        assert coerce_options(None) == PasswordOptions()

    def test_bad_type(self):
        with pytest.raises(InvalidOptionError):
            coerce_options(["minLength", 8])


class TestResults:

    def test_rejected_result(self):
        result = ScoreResult.rejected(["a", "b"])
        assert result.score == -1
        assert result.errors == ("a", "b")
        assert not result.is_valid

    def test_crack_time_options_from_dict(self):
        assert CrackTimeOptions.from_dict({"possibleCharacters": 26}) == CrackTimeOptions(possible_characters=26)
