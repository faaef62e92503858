# -*- coding: utf-8 -*-
"""
tests/test_patterns.py
========================
Sanity checks on the static pattern dictionaries.
"""
from pwmeter.services.patterns import (
    DATE_LONG_RE,
    DATE_SHORT_RE,
    KEYBOARD_PATTERNS,
    REVERSED_KEYBOARD_PATTERNS,
    SEQUENTIAL_LETTERS,
    SEQUENTIAL_NUMBERS,
    SEQUENTIAL_SYMBOLS,
)


class TestSequentialTables:

    def test_letter_windows(self):
        assert len(SEQUENTIAL_LETTERS) == 24
        assert SEQUENTIAL_LETTERS[0] == "abc"
        assert SEQUENTIAL_LETTERS[-1] == "xyz"

    def test_number_windows(self):
        assert SEQUENTIAL_NUMBERS == ("012", "123", "234", "345", "456", "567", "678", "789")

    def test_symbol_windows(self):
        assert SEQUENTIAL_SYMBOLS == ("!@#", "@#$", "#$%", "$%^", "%^&", "^&*", "&*(", "*()")


class TestKeyboardTable:

    def test_size_and_uniqueness(self):
        assert len(KEYBOARD_PATTERNS) == 118
        assert len(set(KEYBOARD_PATTERNS)) == 118

    def test_entries_are_lowercase(self):
        assert all(p == p.lower() for p in KEYBOARD_PATTERNS)

    def test_reversed_table_is_aligned(self):
        for forward, backward in zip(KEYBOARD_PATTERNS, REVERSED_KEYBOARD_PATTERNS):
            assert backward == forward[::-1]

    def test_known_entries(self):
        for p in ("qwerty", "1234567890", "asdfgh", "zxcvbn", "1qaz", ";/p0"):
            assert p in KEYBOARD_PATTERNS


class TestDateRegexes:

    def test_long_shapes(self):
        assert DATE_LONG_RE.fullmatch("25121999")     # DDMMYYYY
        assert DATE_LONG_RE.fullmatch("12251999")     # MMDDYYYY
        assert DATE_LONG_RE.fullmatch("19991225")     # YYYYMMDD

    def test_short_shapes(self):
        assert DATE_SHORT_RE.fullmatch("251299")
        assert DATE_SHORT_RE.fullmatch("122599")
        assert DATE_SHORT_RE.fullmatch("991225")

    def test_rejects_impossible_day_and_month(self):
        assert not DATE_LONG_RE.fullmatch("32131999")
        assert not DATE_SHORT_RE.fullmatch("321399")

    def test_ascii_digits_only(self):
        assert not DATE_SHORT_RE.search("٠١٠١٩٩")
