from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

# -----------------------------------------------------------------------------
# Logging
logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
from ..models import (
    CrackTimeResult,
    PasswordComparison,
    PasswordOptions,
    ScoreResult,
    coerce_options,
)
from .comparison_service import compare_password
from .crack_time_service import calculate_crack_time
from .score_service import compute_score
from .strength_service import get_strength


class PasswordMeter:
    """
    One password plus one policy, with every analysis available as a method.

    Holds nothing but its two constructor arguments; every method recomputes
    from them, so an instance can be shared freely.

        meter = PasswordMeter("Passw0rd!", {"minLength": 8})
        result = meter.compute_score()
        meter.get_strength(result.score, DEFAULT_STRENGTH_SCALE)
    """

    __slots__ = ("_password", "_options")

    def __init__(self, password: str, options=None):
        self._password = password
        self._options: PasswordOptions = coerce_options(options)

    @property
    def password(self) -> str:
        return self._password

    @property
    def options(self) -> PasswordOptions:
        return self._options

    def compute_score(self) -> ScoreResult:
        return compute_score(self._password, self._options)

    def calculate_crack_time(self, crack_time_options=None) -> CrackTimeResult:
        return calculate_crack_time(self._password, crack_time_options)

    @staticmethod
    def get_strength(score: float, scale: Mapping[Any, str]) -> str:
        return get_strength(score, scale)

    def compare_password(self, new_password: str) -> PasswordComparison:
        """Score `new_password` under this meter's policy and compare."""
        return compare_password(self._password, new_password, self._options)

    def __repr__(self) -> str:
        # never echo the password
        return f"PasswordMeter(length={len(self._password)}, options={self._options!r})"


def analyze(password: str, options=None, scale: Optional[Mapping[Any, str]] = None,
            crack_time_options=None) -> dict:
    """
    Score, classify and estimate crack time in one call.

    The strength label is only computed when a scale is given.
    """
    meter = PasswordMeter(password, options)
    result = meter.compute_score()
    report = {
        "score": result.score,
        "errors": list(result.errors),
        "crack_time": meter.calculate_crack_time(crack_time_options).as_dict(),
    }
    if scale is not None:
        report["strength"] = meter.get_strength(result.score, scale)
    logger.debug(f"Analyzed password: score={result.score}, errors={len(result.errors)}")
    return report
