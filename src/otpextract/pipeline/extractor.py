"""Compose the pipeline stages into a single extraction call."""

from __future__ import annotations

import logging
from itertools import chain
from typing import Iterator, List, Optional

from otpextract.core.models import Candidate, Code
from otpextract.core.rules import DEFAULT_RULES, ScoringRules
from otpextract.utils.logging import get_logger

from .candidates import alphanumeric_matches, numeric_matches
from .filters import rejection_reason
from .preprocess import CleanedText, preprocess
from .ranking import rank, unique_by_value
from .scoring import score

logger = get_logger("CodeExtractor")


class CodeExtractor:
    """Find verification codes in a message body, most likely first.

    Holds nothing but its (immutable) scoring rules, so one instance can be
    shared across threads.
    """

    def __init__(self, rules: ScoringRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def extract(self, text: Optional[str]) -> List[Code]:
        return [candidate.code for candidate in self.extract_scored(text)]

    def extract_scored(self, text: Optional[str]) -> List[Candidate]:
        """Ranked candidates including confidence and cleaned-text offsets."""
        if not text:
            return []

        cleaned = preprocess(text)
        candidates = unique_by_value(
            chain(self._accepted_numeric(cleaned), alphanumeric_matches(cleaned))
        )
        for candidate in candidates:
            candidate.confidence = score(cleaned, candidate.start, candidate.end, self.rules)

        ranked = rank(candidates)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Extracted %d code(s) from %d chars: %s",
                len(ranked),
                len(text),
                ", ".join(f"{c.value}={c.confidence}" for c in ranked),
            )
        return ranked

    def _accepted_numeric(self, cleaned: CleanedText) -> Iterator[Candidate]:
        for candidate in numeric_matches(cleaned):
            reason = rejection_reason(cleaned, candidate.start, candidate.end, self.rules)
            if reason is not None:
                logger.debug("Rejected %s at %d (%s)", candidate.value, candidate.start, reason)
                continue
            yield candidate


_default_extractor = CodeExtractor()


def extract(text: Optional[str]) -> List[Code]:
    """Return every plausible verification code in ``text``, ranked by confidence."""
    return _default_extractor.extract(text)
