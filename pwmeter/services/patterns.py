# -*- coding: utf-8 -*-
"""
services/patterns.py
====================
Fixed pattern dictionaries used by the deductive metrics.

Built once at import time and never mutated: tuples, frozensets and
compiled regular expressions only.
"""
import re
import string


# ─── Sequential runs ─────────────────────────────────────────────────────────

def _windows(alphabet: str, size: int = 3) -> tuple:
    return tuple(alphabet[i:i + size] for i in range(len(alphabet) - size + 1))


# abc, bcd, ... xyz  (24 windows)
SEQUENTIAL_LETTERS = _windows(string.ascii_lowercase)

# 012, 123, ... 789  (8 windows)
SEQUENTIAL_NUMBERS = _windows(string.digits)

# Shifted number row, left to right
SEQUENTIAL_SYMBOLS = _windows("!@#$%^&*()")


# ─── Dates ───────────────────────────────────────────────────────────────────

_DAY = r"(0[1-9]|[12][0-9]|3[01])"
_MONTH = r"(0[1-9]|1[0-2])"

# DDMMYYYY | MMDDYYYY | YYYYMMDD
DATE_LONG_RE = re.compile(
    rf"{_DAY}{_MONTH}\d{{4}}|{_MONTH}{_DAY}\d{{4}}|\d{{4}}{_MONTH}{_DAY}",
    re.ASCII,
)

# DDMMYY | MMDDYY | YYMMDD
DATE_SHORT_RE = re.compile(
    rf"{_DAY}{_MONTH}\d{{2}}|{_MONTH}{_DAY}\d{{2}}|\d{{2}}{_MONTH}{_DAY}",
    re.ASCII,
)


# ─── Keyboard adjacency ──────────────────────────────────────────────────────
# Every entry is also checked reversed; entries are lowercase.

KEYBOARD_PATTERNS = (
    # number row
    "1234567890", "234567890", "34567890", "4567890", "567890", "67890",
    "7890", "890",
    "0987654321", "987654321", "87654321", "7654321", "654321", "54321",
    "4321", "321",
    # top letter row
    "qwertyuiop", "wertyuiop", "ertyuiop", "rtyuiop", "tyuiop", "yuiop",
    "uiop", "iop", "op",
    "poiuytrewq", "oiuytrewq", "iuytrewq", "uytrewq", "ytrewq", "trewq",
    "rewq", "ewq", "wq",
    # home row
    "asdfghjkl", "sdfghjkl", "dfghjkl", "fghjkl", "ghjkl", "hjkl", "jkl",
    "lkjhgfdsa", "kjhgfdsa", "jhgfdsa", "hgfdsa", "gfdsa", "fdsa", "dsa",
    # bottom row
    "zxcvbnm", "xcvbnm", "cvbnm", "vbnm", "bnm",
    "mnbvcxz", "nbvcxz", "bvcxz", "vcxz", "cxz",
    # diagonals
    "1qaz", "qazwsx", "azwsxedc", "2wsx", "wsxedc", "sedcrfv", "edcrfvtg",
    "dcfvgb", "3edc", "rfvtgb", "fvtgbyhn", "vtgbyhnujm", "4rfv", "fvgb",
    "gbhn", "bhnj", "hnjm", "5tgb", "6yhn", "7ujm",
    ";/p0", ".lo9", ",ki8", "mj7", "nh6", "bg5", "vf4", "cd3", "xe2", "za1",
    # six-character windows
    "123456", "234567", "345678", "456789",
    "098765", "987654", "876543", "765432", "543210",
    "qwerty", "wertyu", "ertyui", "rtyuio",
    "poiuyt", "oiuytr", "iuytre", "uytrew",
    "asdfgh", "sdfghj", "dfghjk",
    "lkjhgf", "kjhgsd", "jhgfsa", "hgfasd",
    "zxcvbn", "mnbvcx",
    # short
    "qwer", "asdf", "zxcv", "poiuy",
)

REVERSED_KEYBOARD_PATTERNS = tuple(p[::-1] for p in KEYBOARD_PATTERNS)
