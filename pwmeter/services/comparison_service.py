# -*- coding: utf-8 -*-
"""
services/comparison_service.py
==============================
Compare the scores of an old and a new password under one policy.
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from ..exceptions import ComparisonError
from ..models import PasswordComparison, coerce_options
from .score_service import compute_score

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


def round2(value: float) -> float:
    """
    Round to two decimals, halves away from zero, on the exact binary
    value of `value` (same digits as JavaScript's Number.toFixed(2)).
    """
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compare_scores(old_score: int, new_score: int) -> PasswordComparison:
    """
    Raises:
        ComparisonError: if `old_score` is 0
    """
    if old_score == 0:
        logger.warning("Refusing to compare against a zero-score baseline")
        raise ComparisonError(detail=f"new score={new_score}")

    return PasswordComparison(
        old_password_score=old_score,
        new_password_score=new_score,
        difference=round2((new_score - old_score) / old_score * 100),
        difference_percentage=round2(new_score / old_score),
    )


def compare_password(old_password: str, new_password: str, options=None) -> PasswordComparison:
    """
    Score both passwords with the full validate-then-score pipeline under
    the same `options` and report the change.

    A password rejected by the policy takes part with its sentinel
    score -1.
    """
    opts = coerce_options(options)
    old_score = compute_score(old_password, opts).score
    new_score = compute_score(new_password, opts).score
    return compare_scores(old_score, new_score)
