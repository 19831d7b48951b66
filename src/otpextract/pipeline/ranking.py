"""Deduplication and ordering of scored candidates."""

from __future__ import annotations

from typing import Dict, Iterable, List

from otpextract.core.models import Candidate


def unique_by_value(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Keep the first candidate for each value, in discovery order."""
    seen: Dict[str, Candidate] = {}
    for candidate in candidates:
        seen.setdefault(candidate.value, candidate)
    return list(seen.values())


def rank(candidates: Iterable[Candidate]) -> List[Candidate]:
    # sorted() is stable: equal confidence keeps discovery order
    return sorted(candidates, key=lambda c: -c.confidence)
