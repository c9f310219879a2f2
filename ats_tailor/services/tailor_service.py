from __future__ import annotations

import logging
import random
import re
import time
from typing import Literal

from ats_tailor.core.config import settings
from ats_tailor.features import extract_keywords, match_status, score_resume, suggest_keywords
from ats_tailor.lexicon import Lexicon
from ats_tailor.normalize.resume_structure import parse_resume
from ats_tailor.schemas.pipeline import (
    KeywordCandidate,
    MatchScore,
    TailoringReport,
    TailoringStats,
)
from ats_tailor.tailoring import KeywordInjector, fingerprint, reassemble

logger = logging.getLogger(__name__)

_NAME_CLEAN_RE = re.compile(r"[^A-Za-z_]")


class TailorInputError(ValueError):
    def __init__(self, message: str, *, status_code: int = 422):
        super().__init__(message)
        self.status_code = status_code


def _validate_text(name: str, value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TailorInputError(f"{name} must be text, got {type(value).__name__}.")
    if len(value) > settings.tailor_max_input_chars:
        raise TailorInputError(
            f"{name} exceeds {settings.tailor_max_input_chars} characters.",
            status_code=413,
        )
    return value


def _max_keywords(value: int | None) -> int:
    if value is None:
        return settings.tailor_max_keywords
    if value < 1:
        raise TailorInputError("max_keywords must be a positive integer.")
    return value


def generate_filename(
    first_name: str | None = None,
    last_name: str | None = None,
    kind: Literal["cv", "cover_letter"] = "cv",
) -> str:
    first = _NAME_CLEAN_RE.sub("", re.sub(r"\s+", "_", (first_name or "").strip())) or "Applicant"
    last = _NAME_CLEAN_RE.sub("", re.sub(r"\s+", "_", (last_name or "").strip()))
    suffix = "CV" if kind == "cv" else "Cover_Letter"
    stem = f"{first}_{last}" if last else first
    return f"{stem}_{suffix}.pdf"


def rank_job_keywords(
    job_description_text: str,
    *,
    max_keywords: int | None = None,
    lexicon: Lexicon | None = None,
) -> list[KeywordCandidate]:
    job_text = _validate_text("job_description_text", job_description_text)
    return extract_keywords(job_text, _max_keywords(max_keywords), lexicon=lexicon)


def score_against_job(
    resume_text: str,
    job_description_text: str,
    *,
    max_keywords: int | None = None,
    lexicon: Lexicon | None = None,
) -> tuple[list[KeywordCandidate], MatchScore]:
    resume = _validate_text("resume_text", resume_text)
    keywords = rank_job_keywords(job_description_text, max_keywords=max_keywords, lexicon=lexicon)
    return keywords, score_resume(resume, keywords)


def run_tailoring(
    resume_text: str,
    job_description_text: str,
    *,
    max_keywords: int | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    location: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    lexicon: Lexicon | None = None,
) -> TailoringReport:
    """Extract, score, parse, inject and reassemble for one résumé/job pair.

    Never fails on poor text: an empty job, an empty résumé or a résumé
    without roles all produce a report whose text is the best available
    résumé, with warning codes explaining what was skipped.
    """
    started = time.perf_counter()
    resume = _validate_text("resume_text", resume_text)
    job_text = _validate_text("job_description_text", job_description_text)
    if seed is None and rng is None:
        seed = settings.tailor_seed

    warnings: list[str] = []
    if not job_text.strip():
        warnings.append("empty_job_description")
    if not resume.strip():
        warnings.append("empty_resume")

    keywords = extract_keywords(job_text, _max_keywords(max_keywords), lexicon=lexicon)
    if job_text.strip() and not keywords:
        warnings.append("no_keywords_extracted")
    score_before = score_resume(resume, keywords)

    parsed = parse_resume(resume)
    if resume.strip() and not parsed.has_experience_section:
        warnings.append("no_experience_section")
    elif parsed.has_experience_section and parsed.total_bullets == 0:
        warnings.append("no_bullets")

    injection = KeywordInjector(rng=rng, seed=seed).tailor(
        parsed,
        keywords,
        found_keys=[keyword.normalized_key for keyword in score_before.found],
    )
    if keywords and parsed.total_bullets and injection.bullets_modified == 0:
        warnings.append("no_keywords_available")

    if parsed.roles:
        tailored_text = reassemble(parsed, injection.rewritten_roles, location=location)
    elif location and resume.strip():
        tailored_text = reassemble(parsed, [], location=location)
    else:
        tailored_text = resume
    score_after = score_resume(tailored_text, keywords)

    stats = TailoringStats(
        roles_processed=len(parsed.roles),
        bullets_total=parsed.total_bullets,
        bullets_modified=injection.bullets_modified,
        keywords_provided=len(keywords),
        keywords_injected=injection.keywords_injected,
        preserved_companies=[role.company for role in parsed.roles],
        preserved_titles=[role.title for role in parsed.roles],
        preserved_metrics=[
            metric for role in parsed.roles for bullet in role.bullets for metric in bullet.extracted_metrics
        ],
    )
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

    logger.info(
        "resume_tailored keywords=%s bullets=%s modified=%s coverage=%s score_before=%s score_after=%s elapsed_ms=%s",
        len(keywords),
        parsed.total_bullets,
        injection.bullets_modified,
        injection.coverage_percent,
        score_before.total,
        score_after.total,
        elapsed_ms,
    )
    for code in warnings:
        logger.warning("resume_tailoring_degraded reason=%s", code)
    if injection.missing_after_injection:
        logger.debug(
            "resume_tailoring_missing keywords=%s",
            [keyword.normalized_key for keyword in injection.missing_after_injection[:10]],
        )

    return TailoringReport(
        keywords=keywords,
        score_before=score_before,
        score_after=score_after,
        status=match_status(score_after.total),
        suggestions=suggest_keywords(score_after.missing),
        parsed=parsed,
        injection=injection,
        tailored_text=tailored_text,
        fingerprint=fingerprint(tailored_text),
        filename=generate_filename(first_name, last_name),
        stats=stats,
        warnings=warnings,
        elapsed_ms=elapsed_ms,
    )
