# -*- coding: utf-8 -*-
"""
services/score_service.py
=========================
Heuristic password score.

The score is the plain sum of 19 independent metrics, each a pure
function of the password text:

  Additions (8)                     Deductions (11)
  ─────────────────────────────     ─────────────────────────────────
  number_of_characters   len*4      letters_only            -len
  uppercase_letters  (len-n)*2      numbers_only            -len
  lowercase_letters  (len-n)*2      consecutive_uppercase   -2/pair
  numbers                  n*4      consecutive_lowercase   -2/pair
  symbols                  n*6      consecutive_numbers     -2/pair
  middle_numbers_or_symbols n*2     sequential_letters      -3/run
  requirements    met*2 if met>=3   sequential_numbers      -3/run
  entropy     round(len*log2(u))    sequential_symbols      -3/run
                                    repeated_characters     -n² per char
                                    date_patterns           -5/match
                                    keyboard_patterns       -5/match

compute_score() runs the policy validator first; a rejected password
gets the sentinel score -1 and no metric is evaluated.
"""
from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Callable, Dict, Tuple

from ..models import ScoreResult
from ..utils.password_utils import (
    count_adjacent_pairs,
    count_digits,
    count_lowercase,
    count_occurrences,
    count_symbols,
    count_uppercase,
    is_digit,
    is_letter,
    is_lower,
    is_symbol,
    is_upper,
    round_half_up,
)
from .patterns import (
    DATE_LONG_RE,
    DATE_SHORT_RE,
    KEYBOARD_PATTERNS,
    REVERSED_KEYBOARD_PATTERNS,
    SEQUENTIAL_LETTERS,
    SEQUENTIAL_NUMBERS,
    SEQUENTIAL_SYMBOLS,
)
from .validator import validate_password

logger = logging.getLogger(__name__)

Metric = Callable[[str], int]


# ─── Additions ───────────────────────────────────────────────────────────────

def number_of_characters(password: str) -> int:
    return len(password) * 4


def uppercase_letters(password: str) -> int:
    return (len(password) - count_uppercase(password)) * 2


def lowercase_letters(password: str) -> int:
    return (len(password) - count_lowercase(password)) * 2


def numbers(password: str) -> int:
    return count_digits(password) * 4


def symbols(password: str) -> int:
    return count_symbols(password) * 6


def middle_numbers_or_symbols(password: str) -> int:
    """Digits or symbols strictly between the first and last character."""
    if len(password) <= 2:
        return 0
    middle = password[1:-1]
    return sum(1 for c in middle if is_digit(c) or is_symbol(c)) * 2


def requirements(password: str) -> int:
    met = sum([
        len(password) >= 8,
        count_uppercase(password) > 0,
        count_lowercase(password) > 0,
        count_digits(password) > 0,
        count_symbols(password) > 0,
    ])
    return met * 2 if met >= 3 else 0


def entropy(password: str) -> int:
    """length * log2(distinct characters), rounded half up."""
    if not password:
        return 0
    unique = len(set(password))
    return round_half_up(len(password) * math.log2(unique))


# ─── Deductions ──────────────────────────────────────────────────────────────

def letters_only(password: str) -> int:
    if password and all(is_letter(c) for c in password):
        return -len(password)
    return 0


def numbers_only(password: str) -> int:
    if password and all(is_digit(c) for c in password):
        return -len(password)
    return 0


def consecutive_uppercase_letters(password: str) -> int:
    return -count_adjacent_pairs(password, is_upper) * 2


def consecutive_lowercase_letters(password: str) -> int:
    return -count_adjacent_pairs(password, is_lower) * 2


def consecutive_numbers(password: str) -> int:
    return -count_adjacent_pairs(password, is_digit) * 2


def sequential_letters(password: str) -> int:
    # case-insensitive
    return -count_occurrences(password.lower(), SEQUENTIAL_LETTERS) * 3


def sequential_numbers(password: str) -> int:
    return -count_occurrences(password, SEQUENTIAL_NUMBERS) * 3


def sequential_symbols(password: str) -> int:
    return -count_occurrences(password, SEQUENTIAL_SYMBOLS) * 3


def repeated_characters(password: str) -> int:
    counts = Counter(password.lower())
    return -sum(n * n for n in counts.values() if n > 1)


def date_patterns(password: str) -> int:
    """
    -5 per date-shaped run of digits. Long (4-digit year) and short
    (2-digit year) shapes are matched separately, each left to right
    without overlap, so "01011990" counts once as DDMMYYYY and again as
    DDMMYY.
    """
    total = sum(1 for _ in DATE_LONG_RE.finditer(password))
    total += sum(1 for _ in DATE_SHORT_RE.finditer(password))
    return -total * 5


def keyboard_patterns(password: str) -> int:
    """-5 for every dictionary entry, and every reversed entry, found in the password."""
    lowered = password.lower()
    count = sum(1 for p in KEYBOARD_PATTERNS if p in lowered)
    count += sum(1 for p in REVERSED_KEYBOARD_PATTERNS if p in lowered)
    return -count * 5


# ─── Registry ────────────────────────────────────────────────────────────────

ADDITIVE_METRICS: Tuple[Tuple[str, Metric], ...] = (
    ("number_of_characters", number_of_characters),
    ("uppercase_letters", uppercase_letters),
    ("lowercase_letters", lowercase_letters),
    ("numbers", numbers),
    ("symbols", symbols),
    ("middle_numbers_or_symbols", middle_numbers_or_symbols),
    ("requirements", requirements),
    ("entropy", entropy),
)

DEDUCTIVE_METRICS: Tuple[Tuple[str, Metric], ...] = (
    ("letters_only", letters_only),
    ("numbers_only", numbers_only),
    ("consecutive_uppercase_letters", consecutive_uppercase_letters),
    ("consecutive_lowercase_letters", consecutive_lowercase_letters),
    ("consecutive_numbers", consecutive_numbers),
    ("sequential_letters", sequential_letters),
    ("sequential_numbers", sequential_numbers),
    ("sequential_symbols", sequential_symbols),
    ("repeated_characters", repeated_characters),
    ("date_patterns", date_patterns),
    ("keyboard_patterns", keyboard_patterns),
)

ALL_METRICS = ADDITIVE_METRICS + DEDUCTIVE_METRICS


def score_breakdown(password: str) -> Dict[str, int]:
    """Every metric's contribution, in evaluation order. Does not validate."""
    return {name: metric(password) for name, metric in ALL_METRICS}


def compute_score(password: str, options=None) -> ScoreResult:
    """
    Validate `password` against `options`, then sum every metric.

    Returns:
        ScoreResult(score=-1, errors=...) when the policy rejects the
        password, otherwise ScoreResult(score=<sum>, errors=()).
    """
    errors = validate_password(password, options)
    if errors:
        return ScoreResult.rejected(errors)

    score = sum(score_breakdown(password).values())
    logger.debug(f"Computed score {score} for a {len(password)}-character password")
    return ScoreResult(score=score)
