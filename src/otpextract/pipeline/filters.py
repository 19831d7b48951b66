"""False-positive filters for numeric candidates.

Each check inspects the cleaned text around ``[start, end)`` and returns
``True`` when the number is better explained as something other than a code.
"""

from __future__ import annotations

from typing import Callable, Optional

from otpextract.core.patterns import YEAR_CONTEXT_WORDS, YEAR_RE
from otpextract.core.rules import DEFAULT_RULES, ScoringRules

from .context import contains_any, has_keyword_nearby
from .preprocess import CleanedText

_DIGITS = "0123456789"


def _char_at(text: str, index: int) -> str:
    if 0 <= index < len(text):
        return text[index]
    return ""


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in _DIGITS


def looks_like_price(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> bool:
    return "$" in cleaned.text[max(0, start - 2) : start]


def looks_like_year(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> bool:
    value = cleaned.text[start:end]
    if len(value) != 4 or not YEAR_RE.match(value):
        return False
    if contains_any(cleaned.window(start, end, rules.year_context_radius), YEAR_CONTEXT_WORDS):
        return True
    # a bare year-like number with no code context is taken to be a year
    return not has_keyword_nearby(cleaned, start, end, rules.keyword_radius)


def looks_like_timestamp(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> bool:
    if end - start != 4:
        return False
    text = cleaned.text
    return _char_at(text, end) == ":" or _char_at(text, start - 1) == ":"


def is_digit_run_fragment(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> bool:
    text = cleaned.text
    return _is_digit(_char_at(text, start - 1)) or _is_digit(_char_at(text, end))


def is_decimal_fragment(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> bool:
    text = cleaned.text
    if _char_at(text, end) == "." and _is_digit(_char_at(text, end + 1)):
        return True
    return _char_at(text, start - 1) == "." and _is_digit(_char_at(text, start - 2))


NumericFilter = Callable[[CleanedText, int, int, ScoringRules], bool]

NUMERIC_FILTERS: tuple[tuple[str, NumericFilter], ...] = (
    ("price", looks_like_price),
    ("year", looks_like_year),
    ("timestamp", looks_like_timestamp),
    ("digit-run", is_digit_run_fragment),
    ("decimal", is_decimal_fragment),
)


def rejection_reason(
    cleaned: CleanedText,
    start: int,
    end: int,
    rules: ScoringRules = DEFAULT_RULES,
) -> Optional[str]:
    """Name the first filter that rejects the numeric match, or ``None``."""
    for name, check in NUMERIC_FILTERS:
        if check(cleaned, start, end, rules):
            return name
    return None


def is_filtered_numeric(
    cleaned: CleanedText,
    start: int,
    end: int,
    rules: ScoringRules = DEFAULT_RULES,
) -> bool:
    return rejection_reason(cleaned, start, end, rules) is not None
