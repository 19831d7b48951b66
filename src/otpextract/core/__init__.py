"""Core data model, pattern tables and scoring rules."""

from .models import Candidate, Code, CodeType
from .rules import DEFAULT_RULES, ScoringRules
from .settings import ExtractorSettings

__all__ = [
    "Candidate",
    "Code",
    "CodeType",
    "DEFAULT_RULES",
    "ScoringRules",
    "ExtractorSettings",
]
