"""Pattern sweeps that produce raw code candidates."""

from __future__ import annotations

from typing import Iterator

from otpextract.core.models import Candidate, Code, CodeType
from otpextract.core.patterns import ALPHANUMERIC_RE, ASCII_LETTERS, NUMERIC_RE

from .preprocess import CleanedText

_ASCII_DIGITS = frozenset("0123456789")


def numeric_matches(cleaned: CleanedText) -> Iterator[Candidate]:
    """Yield every word-bounded 4, 6 or 8 digit run, left to right."""
    for match in NUMERIC_RE.finditer(cleaned.text):
        yield Candidate(
            code=Code(value=match.group(1), type=CodeType.NUMERIC),
            start=match.start(1),
            end=match.end(1),
        )


def has_mixed_alpha_digit(value: str) -> bool:
    has_letter = has_digit = False
    for ch in value:
        if ch in ASCII_LETTERS:
            has_letter = True
        elif ch in _ASCII_DIGITS:
            has_digit = True
        if has_letter and has_digit:
            return True
    return False


def is_plain_word(value: str) -> bool:
    """True for an all-letter token, which reads as a word rather than a code."""
    return bool(value) and all(ch in ASCII_LETTERS for ch in value.lower())


def alphanumeric_matches(cleaned: CleanedText) -> Iterator[Candidate]:
    """Yield 6-character tokens that mix letters and digits."""
    for match in ALPHANUMERIC_RE.finditer(cleaned.text):
        value = match.group(1)
        if not has_mixed_alpha_digit(value):
            continue
        if is_plain_word(value):
            continue
        yield Candidate(
            code=Code(value=value, type=CodeType.ALPHANUMERIC),
            start=match.start(1),
            end=match.end(1),
        )
