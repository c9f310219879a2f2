from .injection import InjectionResult
from .keyword import KeywordCandidate, KeywordCategory
from .report import TailoringReport, TailoringStats
from .resume import Bullet, ParsedResume, Role, SectionName
from .score import KeywordSuggestions, MatchScore, MatchStatus, Priority, ScoreFactor, TierStat

__all__ = [
    "KeywordCandidate",
    "KeywordCategory",
    "MatchScore",
    "MatchStatus",
    "KeywordSuggestions",
    "Priority",
    "ScoreFactor",
    "TierStat",
    "Bullet",
    "Role",
    "ParsedResume",
    "SectionName",
    "InjectionResult",
    "TailoringReport",
    "TailoringStats",
]
