from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .keyword import KeywordCandidate

Priority = Literal["high", "medium", "low"]


class ScoreFactor(BaseModel):
    points_available: float
    points_awarded: float


class TierStat(BaseModel):
    found: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class MatchScore(BaseModel):
    total: int = Field(default=0, ge=0, le=100)
    breakdown: dict[str, ScoreFactor] = Field(default_factory=dict)
    found: list[KeywordCandidate] = Field(default_factory=list)
    missing: list[KeywordCandidate] = Field(default_factory=list)
    tiers: dict[Priority, TierStat] = Field(default_factory=dict)


class MatchStatus(BaseModel):
    label: str
    tier: Literal["perfect", "excellent", "good", "needs_work", "low"]


class KeywordSuggestions(BaseModel):
    summary: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
