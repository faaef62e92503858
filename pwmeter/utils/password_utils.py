# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure text-scanning helpers shared by the validator and the score engine.
Zero external dependencies.

Character classes are ASCII-only and match JavaScript regex classes:
  uppercase  [A-Z]
  lowercase  [a-z]
  digit      [0-9]
  symbol     \\W  i.e. anything outside [A-Za-z0-9_]
"""
import math
from typing import Callable, Iterable


def is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_letter(ch: str) -> bool:
    return is_upper(ch) or is_lower(ch)


def is_symbol(ch: str) -> bool:
    return not (is_letter(ch) or is_digit(ch) or ch == "_")


def count_chars(password: str, predicate: Callable[[str], bool]) -> int:
    """Number of characters of `password` satisfying `predicate`."""
    return sum(1 for c in password if predicate(c))


def count_uppercase(password: str) -> int:
    return count_chars(password, is_upper)


def count_lowercase(password: str) -> int:
    return count_chars(password, is_lower)


def count_digits(password: str) -> int:
    return count_chars(password, is_digit)


def count_symbols(password: str) -> int:
    return count_chars(password, is_symbol)


def count_adjacent_pairs(password: str, predicate: Callable[[str], bool]) -> int:
    """
    Count indices i where password[i] and password[i + 1] both satisfy
    `predicate`. Overlapping: a run of k matching characters gives k - 1.
    """
    return sum(
        1 for a, b in zip(password, password[1:])
        if predicate(a) and predicate(b)
    )


def count_occurrences(text: str, needles: Iterable[str]) -> int:
    """
    Total number of (possibly overlapping) occurrences of every needle
    in `text`, counting each starting index separately.
    """
    total = 0
    for needle in needles:
        if not needle:
            continue
        start = text.find(needle)
        while start != -1:
            total += 1
            start = text.find(needle, start + 1)
    return total


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (Math.round)."""
    return int(math.floor(value + 0.5))
