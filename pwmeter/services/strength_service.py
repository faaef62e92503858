# -*- coding: utf-8 -*-
"""
services/strength_service.py
============================
Map a score onto a strength label using a caller-supplied scale.

A scale is a mapping with exactly six numeric threshold keys plus the
catch-all key "_":

    {
        40: "Very Weak", 70: "Weak", 100: "Good",
        130: "Strong", 160: "Very Strong", math.inf: "Perfect",
        "_": "Invalid",
    }

Sorted ascending, the thresholds must carry the labels Very Weak .. Perfect
in order, and "_" must carry "Invalid". A score gets the label of the
lowest threshold strictly above it; a score at or above every threshold
gets the catch-all label. Negative scores are always "Invalid".
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, List, Mapping, Tuple

from ..constants import CATCH_ALL_KEY, StrengthLabel
from ..exceptions import InvalidStrengthScaleError

logger = logging.getLogger(__name__)


def _as_number(key) -> float:
    if isinstance(key, bool):
        raise InvalidStrengthScaleError(f"threshold {key!r} is not numeric")
    if isinstance(key, numbers.Real):
        return float(key)
    if isinstance(key, str):
        try:
            return float(key)
        except ValueError:
            pass
    raise InvalidStrengthScaleError(f"threshold {key!r} is not numeric")


def _sorted_thresholds(scale: Mapping[Any, str]) -> List[Tuple[float, Any]]:
    """(numeric value, original key) pairs, ascending."""
    pairs = [(_as_number(key), key) for key in scale if key != CATCH_ALL_KEY]
    pairs.sort(key=lambda pair: pair[0])
    return pairs


def _check_scale(scale) -> List[Tuple[float, Any]]:
    if not isinstance(scale, Mapping):
        raise InvalidStrengthScaleError(f"expected a mapping, got {type(scale).__name__}")

    thresholds = _sorted_thresholds(scale)
    expected = StrengthLabel.ORDER[1:]

    if len(thresholds) != len(expected):
        raise InvalidStrengthScaleError(
            f"expected {len(expected)} thresholds, got {len(thresholds)}")

    values = [value for value, _key in thresholds]
    if len(set(values)) != len(values):
        raise InvalidStrengthScaleError("thresholds must be distinct")

    for (value, key), label in zip(thresholds, expected):
        if scale[key] != label:
            raise InvalidStrengthScaleError(
                f"threshold {key!r} maps to {scale[key]!r}, expected {label!r}")

    if scale.get(CATCH_ALL_KEY) != StrengthLabel.INVALID:
        raise InvalidStrengthScaleError(
            f"catch-all {CATCH_ALL_KEY!r} must map to {StrengthLabel.INVALID!r}")

    return thresholds


def is_valid_strength_scale(scale) -> bool:
    try:
        _check_scale(scale)
    except InvalidStrengthScaleError:
        return False
    return True


def get_strength(score: float, scale: Mapping[Any, str]) -> str:
    """
    Classify `score` with `scale`.

    Raises:
        InvalidStrengthScaleError: if `scale` does not have the required shape,
            checked before the score is looked at
    """
    try:
        thresholds = _check_scale(scale)
    except InvalidStrengthScaleError as e:
        logger.warning(f"Rejected strength scale: {e}")
        raise

    if score < 0:
        return StrengthLabel.INVALID

    for value, key in thresholds:
        if score < value:
            return scale[key]
    return scale[CATCH_ALL_KEY]
