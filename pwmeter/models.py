# -*- coding: utf-8 -*-
"""
pwmeter/models.py
=================
Plain value types passed in and out of the public API.

Every type here is a frozen dataclass: options are immutable snapshots
for the duration of a call, results are derived fresh per call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, Mapping, Optional, Tuple

from .constants import DEFAULT_ERROR_MESSAGES, INVALID_SCORE
from .exceptions import InvalidOptionError

logger = logging.getLogger(__name__)


def _camel_to_snake(name: str) -> str:
    out = []
    for ch in name:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def _as_tuple(option: str, value) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return tuple(value)
    try:
        items = tuple(value)
    except TypeError:
        raise InvalidOptionError(option, value, "expected a sequence of strings") from None
    for item in items:
        if not isinstance(item, str):
            raise InvalidOptionError(option, value, "expected a sequence of strings")
    return items


def _as_count(option: str, value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOptionError(option, value, "expected an integer")
    if value < 0:
        raise InvalidOptionError(option, value, "must not be negative")
    return value


_COUNT_FIELDS = (
    "min_length",
    "max_length",
    "uppercase_letters_min_length",
    "lowercase_letters_min_length",
    "numbers_min_length",
    "symbols_min_length",
)


# ─── Policy ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ErrorMessages:
    """Per-violation message overrides. A falsy field keeps the default."""

    empty: Optional[str] = None
    too_short: Optional[str] = None
    too_long: Optional[str] = None
    not_enough_uppercase: Optional[str] = None
    not_enough_lowercase: Optional[str] = None
    not_enough_numbers: Optional[str] = None
    not_enough_symbols: Optional[str] = None
    does_not_include_all: Optional[str] = None
    contains_excluded: Optional[str] = None
    does_not_start_with: Optional[str] = None
    does_not_end_with: Optional[str] = None
    does_not_include_one_of: Optional[str] = None

    def message_for(self, kind: str) -> str:
        return getattr(self, kind, None) or DEFAULT_ERROR_MESSAGES[kind]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ErrorMessages":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _camel_to_snake(key)
            if name not in known:
                raise InvalidOptionError("customErrorMessages", key, "unknown message kind")
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class PasswordOptions:
    """
    Validation policy applied before scoring.

    Any field left as None (or another falsy value such as 0 or "")
    disables the matching check. Length and count fields must be
    non-negative ints; anything else raises InvalidOptionError.
    """

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    uppercase_letters_min_length: Optional[int] = None
    lowercase_letters_min_length: Optional[int] = None
    numbers_min_length: Optional[int] = None
    symbols_min_length: Optional[int] = None
    include: Optional[Tuple[str, ...]] = None
    exclude: Optional[Tuple[str, ...]] = None
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    include_one: Optional[Tuple[str, ...]] = None
    custom_error_messages: Optional[ErrorMessages] = None

    def __post_init__(self):
        for name in _COUNT_FIELDS:
            _as_count(name, getattr(self, name))
        for name in ("include", "exclude", "include_one"):
            object.__setattr__(self, name, _as_tuple(name, getattr(self, name)))
        if isinstance(self.custom_error_messages, Mapping):
            object.__setattr__(
                self, "custom_error_messages",
                ErrorMessages.from_dict(self.custom_error_messages),
            )

    @property
    def messages(self) -> ErrorMessages:
        return self.custom_error_messages or ErrorMessages()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PasswordOptions":
        """
        Build options from a plain mapping.

        Accepts snake_case keys as well as the camelCase keys of the
        JavaScript API (minLength, customErrorMessages, ...).

        Raises:
            InvalidOptionError: on an unknown key
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _camel_to_snake(key)
            if name not in known:
                logger.warning(f"Rejecting unknown password option: {key!r}")
                raise InvalidOptionError(key, reason="unknown option")
            kwargs[name] = value
        return cls(**kwargs)


def coerce_options(options) -> PasswordOptions:
    """Accept None, a PasswordOptions or a mapping; always return PasswordOptions."""
    if options is None:
        return PasswordOptions()
    if isinstance(options, PasswordOptions):
        return options
    if isinstance(options, Mapping):
        return PasswordOptions.from_dict(options)
    raise InvalidOptionError("options", options, "expected PasswordOptions or a mapping")


# ─── Results ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScoreResult:
    score: int
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def rejected(cls, errors) -> "ScoreResult":
        return cls(score=INVALID_SCORE, errors=tuple(errors))

    def as_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "errors": list(self.errors)}


@dataclass(frozen=True)
class CrackTimeOptions:
    guesses_per_second: Optional[float] = None
    possible_characters: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CrackTimeOptions":
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _camel_to_snake(key)
            if name not in known:
                raise InvalidOptionError(key, reason="unknown crack-time option")
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class CrackTimeResult:
    seconds: float
    description: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PasswordComparison:
    """
    Outcome of comparing an old and a new password.

    Field names are kept for compatibility: `difference` holds the
    percentage change, `difference_percentage` holds the raw ratio.
    """

    old_password_score: int
    new_password_score: int
    difference: float
    difference_percentage: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "oldPasswordScore": self.old_password_score,
            "newPasswordScore": self.new_password_score,
            "difference": self.difference,
            "differencePercentage": self.difference_percentage,
        }
