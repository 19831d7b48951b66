from typing import List, Optional

from pydantic import BaseModel, Field

from otpextract.core.models import Code


class ExtractRequest(BaseModel):
    text: str
    limit: Optional[int] = Field(default=None, ge=1)


class ExtractResponse(BaseModel):
    codes: List[Code]
    best: Optional[str] = None


class HealthState(BaseModel):
    status: str
    version: str
