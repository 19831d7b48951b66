"""Scoring weights and context radii as a single declarative table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScoringRules(BaseModel):
    """Weights added to a candidate's confidence, plus the windows they inspect."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # format plausibility
    six_digit_bonus: int = 30
    eight_digit_bonus: int = 20
    four_digit_bonus: int = 15
    alphanumeric_bonus: int = 10

    keyword_bonus: int = 50
    structural_bonus: int = 20
    isolation_bonus: int = 10

    keyword_radius: int = Field(default=60, ge=0)
    year_context_radius: int = Field(default=30, ge=0)
    structural_window: int = Field(default=10, ge=1)


DEFAULT_RULES = ScoringRules()
