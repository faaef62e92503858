# -*- coding: utf-8 -*-
"""
services/validator.py
=====================
Policy pre-check that gates the score engine.

Every check runs (no short-circuit) and appends its own message, in a
fixed order, only when violated. The empty-password check is always
active; every other check is skipped when its option is unset.
"""
from __future__ import annotations

import logging
from typing import List

from ..constants import ErrorKind as EK
from ..models import coerce_options
from ..utils.password_utils import (
    count_digits,
    count_lowercase,
    count_symbols,
    count_uppercase,
)

logger = logging.getLogger(__name__)


def validate_password(password: str, options=None) -> List[str]:
    """
    Check `password` against `options`.

    Args:
        password: raw password text
        options:  PasswordOptions, a plain mapping, or None

    Returns:
        Ordered violation messages; empty list means acceptable.
    """
    opts = coerce_options(options)
    msgs = opts.messages
    errors: List[str] = []
    length = len(password)

    if length == 0:
        errors.append(msgs.message_for(EK.EMPTY))

    if opts.min_length and length < opts.min_length:
        errors.append(msgs.message_for(EK.TOO_SHORT))

    if opts.max_length and length > opts.max_length:
        errors.append(msgs.message_for(EK.TOO_LONG))

    if opts.uppercase_letters_min_length and \
            count_uppercase(password) < opts.uppercase_letters_min_length:
        errors.append(msgs.message_for(EK.NOT_ENOUGH_UPPERCASE))

    if opts.lowercase_letters_min_length and \
            count_lowercase(password) < opts.lowercase_letters_min_length:
        errors.append(msgs.message_for(EK.NOT_ENOUGH_LOWERCASE))

    if opts.numbers_min_length and count_digits(password) < opts.numbers_min_length:
        errors.append(msgs.message_for(EK.NOT_ENOUGH_NUMBERS))

    if opts.symbols_min_length and count_symbols(password) < opts.symbols_min_length:
        errors.append(msgs.message_for(EK.NOT_ENOUGH_SYMBOLS))

    if opts.include is not None and not all(item in password for item in opts.include):
        errors.append(msgs.message_for(EK.DOES_NOT_INCLUDE_ALL))

    if opts.exclude is not None and any(item in password for item in opts.exclude):
        errors.append(msgs.message_for(EK.CONTAINS_EXCLUDED))

    if opts.starts_with and not password.startswith(opts.starts_with):
        errors.append(msgs.message_for(EK.DOES_NOT_START_WITH))

    if opts.ends_with and not password.endswith(opts.ends_with):
        errors.append(msgs.message_for(EK.DOES_NOT_END_WITH))

    if opts.include_one is not None and not any(item in password for item in opts.include_one):
        errors.append(msgs.message_for(EK.DOES_NOT_INCLUDE_ONE_OF))

    if errors:
        logger.debug(f"Password rejected by policy ({len(errors)} violation(s))")
    return errors
