from __future__ import annotations

from pydantic import BaseModel, Field

from .injection import InjectionResult
from .keyword import KeywordCandidate
from .resume import ParsedResume
from .score import KeywordSuggestions, MatchScore, MatchStatus


class TailoringStats(BaseModel):
    roles_processed: int = 0
    bullets_total: int = 0
    bullets_modified: int = 0
    keywords_provided: int = 0
    keywords_injected: int = 0
    preserved_companies: list[str] = Field(default_factory=list)
    preserved_titles: list[str] = Field(default_factory=list)
    preserved_metrics: list[str] = Field(default_factory=list)


class TailoringReport(BaseModel):
    keywords: list[KeywordCandidate] = Field(default_factory=list)
    score_before: MatchScore = Field(default_factory=MatchScore)
    score_after: MatchScore = Field(default_factory=MatchScore)
    status: MatchStatus
    suggestions: KeywordSuggestions = Field(default_factory=KeywordSuggestions)
    parsed: ParsedResume = Field(default_factory=ParsedResume)
    injection: InjectionResult = Field(default_factory=InjectionResult)
    tailored_text: str = ""
    fingerprint: str = ""
    filename: str = ""
    stats: TailoringStats = Field(default_factory=TailoringStats)
    warnings: list[str] = Field(default_factory=list)
    elapsed_ms: float = 0.0
