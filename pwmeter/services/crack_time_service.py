# -*- coding: utf-8 -*-
"""
services/crack_time_service.py
==============================
Closed-form brute-force crack time estimate.

    combinations = possible_characters ** len(password)
    seconds      = combinations / guesses_per_second

This is a keyspace-exhaustion bound, not an attack simulation.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import Mapping

from ..constants import (
    DEFAULT_GUESSES_PER_SECOND,
    DEFAULT_POSSIBLE_CHARACTERS,
    INFINITE_DURATION,
)
from ..exceptions import InvalidOptionError
from ..models import CrackTimeOptions, CrackTimeResult
from ..utils.time_utils import format_time_units, seconds_to_time_units

logger = logging.getLogger(__name__)


def _coerce(options) -> CrackTimeOptions:
    if options is None:
        return CrackTimeOptions()
    if isinstance(options, CrackTimeOptions):
        return options
    if isinstance(options, Mapping):
        return CrackTimeOptions.from_dict(options)
    raise InvalidOptionError("options", options, "expected CrackTimeOptions or a mapping")


def _positive_or_default(name: str, value, default):
    # falsy (None, 0) falls back to the default
    if not value:
        return default
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidOptionError(name, value, "must be a number")
    if math.isnan(value):
        raise InvalidOptionError(name, value, "must be a number")
    if value < 0:
        raise InvalidOptionError(name, value, "must not be negative")
    return value


def calculate_crack_time(password: str, options=None) -> CrackTimeResult:
    """
    Estimate the time needed to exhaust the keyspace of `password`.

    Args:
        password: raw password text (only its length is used)
        options:  CrackTimeOptions, a mapping with guesses_per_second /
                  possible_characters (camelCase accepted), or None

    Returns:
        CrackTimeResult(seconds, description)

    Raises:
        InvalidOptionError: on a negative or non-numeric option
    """
    opts = _coerce(options)
    guesses_per_second = _positive_or_default(
        "guesses_per_second", opts.guesses_per_second, DEFAULT_GUESSES_PER_SECOND)
    possible_characters = _positive_or_default(
        "possible_characters", opts.possible_characters, DEFAULT_POSSIBLE_CHARACTERS)

    try:
        combinations = possible_characters ** len(password)
        seconds = float(combinations / guesses_per_second)
    except OverflowError:
        seconds = math.inf

    if math.isinf(seconds):
        logger.debug("Crack time exceeds float range")
        return CrackTimeResult(seconds=math.inf, description=INFINITE_DURATION)

    return CrackTimeResult(
        seconds=seconds,
        description=format_time_units(seconds_to_time_units(seconds)),
    )
