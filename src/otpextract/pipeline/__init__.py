"""Extraction pipeline stages, composed left to right by ``CodeExtractor``."""

from .candidates import alphanumeric_matches, has_mixed_alpha_digit, is_plain_word, numeric_matches
from .extractor import CodeExtractor, extract
from .filters import is_filtered_numeric, rejection_reason
from .preprocess import CleanedText, preprocess
from .ranking import rank, unique_by_value
from .scoring import SCORING_RULES, score

__all__ = [
    "CleanedText",
    "CodeExtractor",
    "SCORING_RULES",
    "alphanumeric_matches",
    "extract",
    "has_mixed_alpha_digit",
    "is_filtered_numeric",
    "is_plain_word",
    "numeric_matches",
    "preprocess",
    "rank",
    "rejection_reason",
    "score",
    "unique_by_value",
]
