"""Data models shared across the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class CodeType(str, Enum):
    """Kinds of verification code the pipeline can produce."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


class Code(BaseModel):
    """A verification code found in a message body."""

    model_config = ConfigDict(frozen=True)

    value: str
    type: CodeType


@dataclass(slots=True)
class Candidate:
    """A code under consideration, with its position in the cleaned text."""

    code: Code
    start: int
    end: int
    confidence: int = 0

    @property
    def value(self) -> str:
        return self.code.value
