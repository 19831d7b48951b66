"""Helpers for pulling one-time passwords out of unstructured message text."""

from __future__ import annotations

from typing import List, Optional

from otpextract.core.models import Code
from otpextract.core.rules import DEFAULT_RULES, ScoringRules
from otpextract.pipeline.extractor import CodeExtractor


class OtpReader:
    """Picks the most likely code, or the top few, from a message body."""

    def __init__(self, rules: ScoringRules = DEFAULT_RULES, *, default_limit: int = 3) -> None:
        if default_limit < 1:
            raise ValueError("default_limit must be at least 1")
        self._extractor = CodeExtractor(rules)
        self.default_limit = default_limit

    def parse(self, text: Optional[str]) -> Optional[str]:
        codes = self._extractor.extract(text)
        return codes[0].value if codes else None

    def top(self, text: Optional[str], limit: Optional[int] = None) -> List[Code]:
        """Highest-confidence codes, for a user or automation to choose from."""
        limit = self.default_limit if limit is None else limit
        if limit < 1:
            return []
        return self._extractor.extract(text)[:limit]
