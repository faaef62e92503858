"""
pwmeter Constants - Single Source of Truth
==========================================

This file contains all constants used across the library.
Using constants instead of magic strings prevents typos and makes refactoring easier.
"""
import math
from types import MappingProxyType


class StrengthLabel:
    """
    Strength labels - SINGLE SOURCE OF TRUTH

    Usage:
        from pwmeter.constants import StrengthLabel as SL
        if label == SL.PERFECT: ...
    """

    INVALID = "Invalid"
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    GOOD = "Good"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"
    PERFECT = "Perfect"

    # Fixed order; thresholds sorted ascending map onto ORDER[1:]
    ORDER = (INVALID, VERY_WEAK, WEAK, GOOD, STRONG, VERY_STRONG, PERFECT)


class ErrorKind:
    """Violation kinds, used as field names of ErrorMessages."""

    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    NOT_ENOUGH_UPPERCASE = "not_enough_uppercase"
    NOT_ENOUGH_LOWERCASE = "not_enough_lowercase"
    NOT_ENOUGH_NUMBERS = "not_enough_numbers"
    NOT_ENOUGH_SYMBOLS = "not_enough_symbols"
    DOES_NOT_INCLUDE_ALL = "does_not_include_all"
    CONTAINS_EXCLUDED = "contains_excluded"
    DOES_NOT_START_WITH = "does_not_start_with"
    DOES_NOT_END_WITH = "does_not_end_with"
    DOES_NOT_INCLUDE_ONE_OF = "does_not_include_one_of"


# Default (English) validation messages, keyed by ErrorKind
DEFAULT_ERROR_MESSAGES = {
    ErrorKind.EMPTY: "Password is empty.",
    ErrorKind.TOO_SHORT: "Password is too short.",
    ErrorKind.TOO_LONG: "Password is too long.",
    ErrorKind.NOT_ENOUGH_UPPERCASE: "Not enough uppercase letters.",
    ErrorKind.NOT_ENOUGH_LOWERCASE: "Not enough lowercase letters.",
    ErrorKind.NOT_ENOUGH_NUMBERS: "Not enough numbers.",
    ErrorKind.NOT_ENOUGH_SYMBOLS: "Not enough symbols.",
    ErrorKind.DOES_NOT_INCLUDE_ALL: "Password must include all specified characters.",
    ErrorKind.CONTAINS_EXCLUDED: "Password contains excluded characters.",
    ErrorKind.DOES_NOT_START_WITH: "Password does not start with the specified character.",
    ErrorKind.DOES_NOT_END_WITH: "Password does not end with the specified character.",
    ErrorKind.DOES_NOT_INCLUDE_ONE_OF: "Password must contain at least one of the specified characters.",
}


# ==================== Scoring ====================

INVALID_SCORE = -1          # sentinel: not computed, policy violated
CATCH_ALL_KEY = "_"         # strength-scale key for scores above every threshold


# ==================== Crack time ====================

DEFAULT_GUESSES_PER_SECOND = 5 * 10 ** 11
DEFAULT_POSSIBLE_CHARACTERS = 95    # printable ASCII

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = SECONDS_IN_MINUTE * 60
SECONDS_IN_DAY = SECONDS_IN_HOUR * 24
SECONDS_IN_MONTH = SECONDS_IN_DAY * 30.44       # average month
SECONDS_IN_YEAR = SECONDS_IN_DAY * 365.25       # average year incl. leap years
SECONDS_IN_DECADE = SECONDS_IN_YEAR * 10
SECONDS_IN_CENTURY = SECONDS_IN_YEAR * 100
SECONDS_IN_MILLENNIUM = SECONDS_IN_YEAR * 1000

# (plural, singular, length in seconds), largest first
TIME_UNITS = (
    ("millennia", "millennium", SECONDS_IN_MILLENNIUM),
    ("centuries", "century", SECONDS_IN_CENTURY),
    ("decades", "decade", SECONDS_IN_DECADE),
    ("years", "year", SECONDS_IN_YEAR),
    ("months", "month", SECONDS_IN_MONTH),
    ("days", "day", SECONDS_IN_DAY),
    ("hours", "hour", SECONDS_IN_HOUR),
    ("minutes", "minute", SECONDS_IN_MINUTE),
    ("seconds", "second", 1),
)

MINIMUM_DURATION = "1 second"
INFINITE_DURATION = "infinite"


# ==================== Default strength scale ====================
# Top threshold is infinite so a valid score never reaches the catch-all.
# Read-only; copy with dict(DEFAULT_STRENGTH_SCALE) to customise.

DEFAULT_STRENGTH_SCALE = MappingProxyType({
    40: StrengthLabel.VERY_WEAK,
    70: StrengthLabel.WEAK,
    100: StrengthLabel.GOOD,
    130: StrengthLabel.STRONG,
    160: StrengthLabel.VERY_STRONG,
    math.inf: StrengthLabel.PERFECT,
    CATCH_ALL_KEY: StrengthLabel.INVALID,
})
