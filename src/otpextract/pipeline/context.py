"""Keyword lookups around a candidate position."""

from __future__ import annotations

from typing import Iterable

from otpextract.core.patterns import KEYWORDS

from .preprocess import CleanedText


def contains_any(window: str, words: Iterable[str]) -> bool:
    return any(word in window for word in words)


def has_keyword_nearby(cleaned: CleanedText, start: int, end: int, radius: int) -> bool:
    """Check whether a verification keyword sits within ``radius`` of the match."""
    return contains_any(cleaned.window(start, end, radius), KEYWORDS)
