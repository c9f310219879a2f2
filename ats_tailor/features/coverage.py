from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import Any

from ats_tailor.core.config.scoring import get_scoring_value
from ats_tailor.lexicon import Lexicon
from ats_tailor.schemas.pipeline import (
    KeywordCandidate,
    KeywordSuggestions,
    MatchScore,
    MatchStatus,
    ScoreFactor,
    TierStat,
)

from .keywords import extract_keywords

logger = logging.getLogger(__name__)

_DEFAULT_TIERS: dict[str, tuple[str, ...]] = {
    "high": ("technical", "certifications"),
    "medium": ("skills", "industry"),
    "low": ("action_verbs", "general"),
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _points(name: str, default: float) -> float:
    return float(get_scoring_value(f"scorer.points.{name}", default))


def priority_for(category: str) -> str:
    """Scorer tiering by category, independent of extractor weights."""
    for tier in ("high", "medium", "low"):
        categories = get_scoring_value(f"scorer.tiers.{tier}", None) or _DEFAULT_TIERS[tier]
        if category in categories:
            return tier
    return "low"


@lru_cache(maxsize=2048)
def _keyword_pattern(variants: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = []
    for variant in variants:
        words = [re.escape(word) for word in variant.split()]
        if words:
            alternatives.append(r"[\s-]+".join(words))
    body = "|".join(sorted(set(alternatives), key=len, reverse=True))
    return re.compile(rf"(?<![a-z0-9])(?:{body})(?:s|es)?(?![a-z0-9])", re.IGNORECASE)


def keyword_present(text: str, keyword: KeywordCandidate) -> bool:
    """Word-boundary, case-insensitive match allowing plural and hyphen/space variants."""
    if not text:
        return False
    variants = (
        keyword.normalized_key.replace("-", " "),
        keyword.term.lower().replace("-", " "),
    )
    return bool(_keyword_pattern(variants).search(text))


def score_resume(resume_text: str, ranked_keywords: Sequence[KeywordCandidate]) -> MatchScore:
    if not isinstance(resume_text, str) or not resume_text.strip() or not ranked_keywords:
        return MatchScore()

    found: list[KeywordCandidate] = []
    missing: list[KeywordCandidate] = []
    tiers = {tier: TierStat() for tier in ("high", "medium", "low")}

    for keyword in ranked_keywords:
        tier = tiers[priority_for(keyword.category)]
        tier.total += 1
        if keyword_present(resume_text, keyword):
            found.append(keyword)
            tier.found += 1
        else:
            missing.append(keyword)

    coverage_points = _points("keyword_coverage", 50)
    penalty_points = _points("missing_high_penalty", 20)
    experience_points = _points("experience_base", 20)
    technical_points = _points("technical_alignment", 15)
    format_points = _points("format_base", 15)
    technical_target = float(get_scoring_value("scorer.technical_target", 10)) or 10.0

    high = tiers["high"]
    missing_high = high.total - high.found
    found_technical = sum(1 for keyword in found if keyword.category == "technical")

    keyword_coverage = min(coverage_points, coverage_points * len(found) / len(ranked_keywords))
    missing_high_penalty = min(penalty_points, penalty_points * missing_high / max(1, high.total))
    technical_alignment = min(technical_points, technical_points * found_technical / technical_target)

    raw_total = keyword_coverage + experience_points + technical_alignment + format_points - missing_high_penalty
    total = max(0, min(100, _round_half_up(raw_total)))

    breakdown = {
        "keyword_coverage": ScoreFactor(points_available=coverage_points, points_awarded=round(keyword_coverage, 2)),
        "missing_high_penalty": ScoreFactor(
            points_available=penalty_points, points_awarded=-round(missing_high_penalty, 2)
        ),
        "experience_base": ScoreFactor(points_available=experience_points, points_awarded=experience_points),
        "technical_alignment": ScoreFactor(
            points_available=technical_points, points_awarded=round(technical_alignment, 2)
        ),
        "format_base": ScoreFactor(points_available=format_points, points_awarded=format_points),
    }
    logger.debug(
        "resume_scored total=%s found=%s missing=%s missing_high=%s",
        total,
        len(found),
        len(missing),
        missing_high,
    )
    return MatchScore(total=total, breakdown=breakdown, found=found, missing=missing, tiers=tiers)


def match_status(score: int) -> MatchStatus:
    if score >= int(get_scoring_value("scorer.status.perfect", 95)):
        return MatchStatus(label="PERFECT", tier="perfect")
    if score >= int(get_scoring_value("scorer.status.excellent", 85)):
        return MatchStatus(label="EXCELLENT", tier="excellent")
    if score >= int(get_scoring_value("scorer.status.good", 70)):
        return MatchStatus(label="GOOD", tier="good")
    if score >= int(get_scoring_value("scorer.status.needs_work", 50)):
        return MatchStatus(label="NEEDS WORK", tier="needs_work")
    return MatchStatus(label="LOW MATCH", tier="low")


def _terms(keywords: Iterable[KeywordCandidate], limit: int) -> list[str]:
    output: list[str] = []
    seen: set[str] = set()
    for keyword in keywords:
        if keyword.normalized_key in seen:
            continue
        seen.add(keyword.normalized_key)
        output.append(keyword.term)
        if len(output) >= limit:
            break
    return output


def suggest_keywords(keywords: Sequence[KeywordCandidate]) -> KeywordSuggestions:
    """Spread (usually missing) keywords over the sections where they read naturally."""
    technical = [k for k in keywords if k.category == "technical"][: int(get_scoring_value("suggestions.technical_pool", 8))]
    skills = [k for k in keywords if k.category == "skills"][: int(get_scoring_value("suggestions.skills_pool", 5))]
    actions = [k for k in keywords if k.category == "action_verbs"][: int(get_scoring_value("suggestions.action_pool", 5))]

    return KeywordSuggestions(
        summary=_terms(technical[:4] + skills[:4], int(get_scoring_value("suggestions.summary", 8))),
        experience=_terms(technical + actions, int(get_scoring_value("suggestions.experience", 20))),
        skills=_terms(technical + skills, int(get_scoring_value("suggestions.skills", 15))),
    )


def predict_match_score(
    job_text: str,
    user_skills: Sequence[str | dict[str, Any]],
    *,
    max_keywords: int = 40,
    lexicon: Lexicon | None = None,
) -> MatchScore:
    """Score a bare skill list against a job before any résumé exists."""
    names: list[str] = []
    for skill in user_skills or ():
        if isinstance(skill, str):
            names.append(skill)
        elif isinstance(skill, dict):
            names.append(str(skill.get("name") or ""))
    keywords = extract_keywords(job_text, max_keywords, lexicon=lexicon)
    return score_resume(" ".join(name for name in names if name), keywords)
