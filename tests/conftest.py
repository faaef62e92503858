"""
tests/conftest.py
=================
Shared pytest fixtures — pure Python, no I/O beyond tmp_path.
"""
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from pwmeter.constants import StrengthLabel as SL
from pwmeter.models import PasswordOptions


# ─── Strength scales ─────────────────────────────────────────────────────────

@pytest.fixture
def scale():
    """A compatible scale with small round thresholds."""
    return {
        10: SL.VERY_WEAK,
        20: SL.WEAK,
        30: SL.GOOD,
        40: SL.STRONG,
        50: SL.VERY_STRONG,
        60: SL.PERFECT,
        "_": SL.INVALID,
    }


# ─── Policies ────────────────────────────────────────────────────────────────

@pytest.fixture
def strict_options():
    return PasswordOptions(
        min_length=8,
        max_length=32,
        uppercase_letters_min_length=1,
        lowercase_letters_min_length=1,
        numbers_min_length=1,
        symbols_min_length=1,
    )


# ─── Logging isolation ───────────────────────────────────────────────────────

@pytest.fixture
def restore_root_logger():
    """Undo any handler/level changes a test makes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
