"""
pwmeter
=======

Offline heuristic password strength meter.

Public API:
    - compute_score(password, options=None)        -> ScoreResult
    - calculate_crack_time(password, options=None) -> CrackTimeResult
    - get_strength(score, scale)                   -> str
    - compare_password(old, new, options=None)     -> PasswordComparison
    - PasswordMeter: the same operations bound to one password and policy
"""
import logging

from .constants import DEFAULT_STRENGTH_SCALE, StrengthLabel
from .exceptions import (
    ComparisonError,
    ConfigurationError,
    InvalidOptionError,
    InvalidStrengthScaleError,
    PasswordMeterError,
)
from .models import (
    CrackTimeOptions,
    CrackTimeResult,
    ErrorMessages,
    PasswordComparison,
    PasswordOptions,
    ScoreResult,
)
from .services import (
    PasswordMeter,
    analyze,
    calculate_crack_time,
    compare_password,
    compare_scores,
    compute_score,
    get_strength,
    is_valid_strength_scale,
    score_breakdown,
    validate_password,
)
from .version import VERSION as __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Operations
    "compute_score",
    "calculate_crack_time",
    "get_strength",
    "compare_password",
    "compare_scores",
    "validate_password",
    "score_breakdown",
    "is_valid_strength_scale",
    "analyze",
    "PasswordMeter",

    # Models
    "PasswordOptions",
    "ErrorMessages",
    "ScoreResult",
    "CrackTimeOptions",
    "CrackTimeResult",
    "PasswordComparison",

    # Constants
    "StrengthLabel",
    "DEFAULT_STRENGTH_SCALE",

    # Errors
    "PasswordMeterError",
    "ConfigurationError",
    "InvalidStrengthScaleError",
    "InvalidOptionError",
    "ComparisonError",
]
