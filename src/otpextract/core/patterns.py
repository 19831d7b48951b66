"""Process-wide pattern and keyword tables.

Everything here is built once at import time and never mutated, so any number
of concurrent extractions may read it without locking.
"""

from __future__ import annotations

import re

# terms that indicate a nearby number is a verification code
KEYWORDS: tuple[str, ...] = (
    "verification",
    "code",
    "otp",
    "one-time",
    "confirm",
    "pin",
    "security code",
    "2fa",
    "authenticate",
    "verify",
)

# terms that mark a nearby 4-digit number as a year
YEAR_CONTEXT_WORDS: tuple[str, ...] = (
    "copyright",
    "(c)",
    "year",
    "since",
    "est.",
    "founded",
)

NUMERIC_RE = re.compile(r"\b(\d{4}|\d{6}|\d{8})\b", re.ASCII)
ALPHANUMERIC_RE = re.compile(r"\b([A-Za-z0-9]{6})\b", re.ASCII)

# whitespace-delimited runs; links and addresses are judged one run at a time
TOKEN_RE = re.compile(r"\S+", re.ASCII)

ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
SCHEME_CHARS = ASCII_LETTERS | frozenset("0123456789+.-")
YEAR_RE = re.compile(r"^(?:19|20)\d{2}$", re.ASCII)

# "...:", "...-" or "... is" right before a code
STRUCTURAL_CUE_RE = re.compile(r"(?:[:\-]|\bis)$", re.ASCII)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, keeping every offset stable."""
    return text.translate(_ASCII_LOWER)
