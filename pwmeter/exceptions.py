"""
exceptions.py
=============
pwmeter — Hierarchical Exception System

All library exceptions inherit from PasswordMeterError so callers
can catch the full hierarchy with a single except clause when needed.

Policy violations are NOT exceptions: they are returned inside
ScoreResult.errors. Everything below signals a programmer error
(bad configuration or an impossible comparison).

Structure
---------
PasswordMeterError
├── ConfigurationError
│   └── InvalidStrengthScaleError
├── InvalidOptionError
└── ComparisonError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PasswordMeterError(Exception):
    """Base exception for all pwmeter errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "ZERO_BASELINE"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PasswordMeterError):
    """Raised when configuration is invalid or incomplete."""


class InvalidStrengthScaleError(ConfigurationError):
    """Raised when a strength scale does not have the required shape."""

    def __init__(self, reason: str = "", **kwargs):
        kwargs.setdefault("code", "INVALID_STRENGTH_SCALE")
        super().__init__("Invalid PasswordStrengthScore configuration.", detail=reason, **kwargs)
        self.reason = reason


# ─── Options ─────────────────────────────────────────────────────────────────

class InvalidOptionError(PasswordMeterError):
    """Raised when a policy or crack-time option is malformed."""

    def __init__(self, option: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for option '{option}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        kwargs.setdefault("code", "INVALID_OPTION")
        super().__init__(msg, **kwargs)
        self.option = option
        self.value = value
        self.reason = reason


# ─── Comparison ──────────────────────────────────────────────────────────────

class ComparisonError(PasswordMeterError):
    """Raised when two scores cannot be compared."""

    def __init__(self, message: str = "cannot compare against a zero-score baseline", **kwargs):
        kwargs.setdefault("code", "ZERO_BASELINE")
        super().__init__(message, **kwargs)


__all__ = [
    "PasswordMeterError",
    "ConfigurationError",
    "InvalidStrengthScaleError",
    "InvalidOptionError",
    "ComparisonError",
]
