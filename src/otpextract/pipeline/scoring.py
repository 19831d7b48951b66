"""Additive confidence scoring.

Every rule is a function of the cleaned text and a candidate span returning
its contribution; ``SCORING_RULES`` lists them and ``score`` sums them.
"""

from __future__ import annotations

from typing import Callable

from otpextract.core.patterns import STRUCTURAL_CUE_RE
from otpextract.core.rules import DEFAULT_RULES, ScoringRules

from .context import has_keyword_nearby
from .preprocess import CleanedText

_WHITESPACE_BOUNDARY = frozenset("\n \t")


def format_bonus(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> int:
    value = cleaned.text[start:end]
    length = len(value)
    digits = sum(1 for ch in value if "0" <= ch <= "9")
    if length == digits == 6:
        return rules.six_digit_bonus
    if length == digits == 8:
        return rules.eight_digit_bonus
    if length == digits == 4:
        return rules.four_digit_bonus
    if length == 6 and digits < 6:
        return rules.alphanumeric_bonus
    return 0


def keyword_bonus(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> int:
    if has_keyword_nearby(cleaned, start, end, rules.keyword_radius):
        return rules.keyword_bonus
    return 0


def structural_bonus(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> int:
    """Reward a code introduced by ``:``, ``-`` or ``is``."""
    prefix = cleaned.lower[max(0, start - rules.structural_window) : start].rstrip()
    if STRUCTURAL_CUE_RE.search(prefix):
        return rules.structural_bonus
    return 0


def isolation_bonus(cleaned: CleanedText, start: int, end: int, rules: ScoringRules) -> int:
    text = cleaned.text
    before = start == 0 or text[start - 1] in _WHITESPACE_BOUNDARY
    after = end >= len(text) or text[end] in _WHITESPACE_BOUNDARY
    return rules.isolation_bonus if before and after else 0


ScoringRule = Callable[[CleanedText, int, int, ScoringRules], int]

SCORING_RULES: tuple[tuple[str, ScoringRule], ...] = (
    ("format", format_bonus),
    ("keyword", keyword_bonus),
    ("structure", structural_bonus),
    ("isolation", isolation_bonus),
)


def score(cleaned: CleanedText, start: int, end: int, rules: ScoringRules = DEFAULT_RULES) -> int:
    return sum(rule(cleaned, start, end, rules) for _, rule in SCORING_RULES)


def explain(cleaned: CleanedText, start: int, end: int, rules: ScoringRules = DEFAULT_RULES) -> dict[str, int]:
    """Per-rule contributions, for debugging a ranking."""
    return {name: rule(cleaned, start, end, rules) for name, rule in SCORING_RULES}
