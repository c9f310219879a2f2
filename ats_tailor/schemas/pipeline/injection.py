from __future__ import annotations

from pydantic import BaseModel, Field

from .keyword import KeywordCandidate


class InjectionResult(BaseModel):
    rewritten_bullets: list[str] = Field(default_factory=list)
    rewritten_roles: list[list[str]] = Field(default_factory=list)
    used_keywords: list[str] = Field(default_factory=list)
    injected_keywords: list[str] = Field(default_factory=list)
    coverage_percent: int = Field(default=0, ge=0, le=100)
    missing_after_injection: list[KeywordCandidate] = Field(default_factory=list)
    bullets_modified: int = Field(default=0, ge=0)
    keywords_injected: int = Field(default=0, ge=0)
    budget_per_bullet: int = Field(default=0, ge=0)
