from .coverage import (
    keyword_present,
    match_status,
    predict_match_score,
    priority_for,
    score_resume,
    suggest_keywords,
)
from .keywords import KeywordExtractor, extract_keywords

__all__ = [
    "KeywordExtractor",
    "extract_keywords",
    "keyword_present",
    "match_status",
    "predict_match_score",
    "priority_for",
    "score_resume",
    "suggest_keywords",
]
