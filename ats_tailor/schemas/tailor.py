from __future__ import annotations

from pydantic import BaseModel, Field

from ats_tailor.schemas.pipeline import KeywordCandidate, KeywordSuggestions, MatchScore, MatchStatus


class KeywordsRequest(BaseModel):
    job_description_text: str = Field(min_length=1, max_length=50000)
    max_keywords: int | None = Field(default=None, ge=1, le=100)


class KeywordsResponse(BaseModel):
    keywords: list[KeywordCandidate]


class ScoreRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=50000)
    job_description_text: str = Field(min_length=1, max_length=50000)
    max_keywords: int | None = Field(default=None, ge=1, le=100)


class ScoreResponse(BaseModel):
    keywords: list[KeywordCandidate]
    score: MatchScore
    status: MatchStatus
    suggestions: KeywordSuggestions


class TailorRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=50000)
    job_description_text: str = Field(min_length=1, max_length=50000)
    max_keywords: int | None = Field(default=None, ge=1, le=100)
    seed: int | None = None
    location: str | None = Field(default=None, max_length=200)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class TailorResponse(BaseModel):
    tailored_text: str
    fingerprint: str
    filename: str
    score_before: MatchScore
    score_after: MatchScore
    status: MatchStatus
    coverage_percent: int = Field(ge=0, le=100)
    used_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[KeywordCandidate] = Field(default_factory=list)
    suggestions: KeywordSuggestions
    warnings: list[str] = Field(default_factory=list)
    elapsed_ms: float = 0.0
