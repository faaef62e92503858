# -*- coding: utf-8 -*-
"""
utils/time_utils.py
=====================
Break a number of seconds into calendar units and render it as text.

    >>> format_time_units(seconds_to_time_units(90061))
    '1 day, 1 hour, 1 minute, 1 second'
"""
import math
from typing import Dict

from ..constants import MINIMUM_DURATION, TIME_UNITS


def seconds_to_time_units(total_seconds: float) -> Dict[str, int]:
    """
    Successive floor-division of `total_seconds` by each unit, largest
    first, carrying the remainder forward.

    Returns an ordered mapping {plural unit name: count}.
    """
    units = {}
    remaining = total_seconds
    for plural, _singular, length in TIME_UNITS:
        units[plural] = int(math.floor(remaining / length))
        remaining = math.fmod(remaining, length)
    return units


def singularize(plural: str, value: int) -> str:
    if value != 1:
        return plural
    for name, singular, _length in TIME_UNITS:
        if name == plural:
            return singular
    return plural


def format_time_units(units: Dict[str, int]) -> str:
    """'1 second' when every unit is zero, else the non-zero units joined by ', '."""
    if all(value == 0 for value in units.values()):
        return MINIMUM_DURATION
    return ", ".join(
        f"{value} {singularize(unit, value)}"
        for unit, value in units.items()
        if value > 0
    )
