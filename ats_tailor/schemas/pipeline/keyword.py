from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

KeywordCategory = Literal["technical", "skills", "certifications", "action_verbs", "industry", "general"]


class KeywordCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str = Field(min_length=1)
    normalized_key: str = Field(min_length=1)
    category: KeywordCategory = "general"
    weight: float = Field(default=1.0, gt=0.0)
    frequency: int = Field(default=1, ge=1)
    score: float = Field(default=0.0, ge=0.0)
    is_phrase: bool = False
    first_seen: int = Field(default=0, ge=0)
