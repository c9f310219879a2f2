from fastapi import APIRouter, Depends, HTTPException, Request

from ats_tailor.core.rate_limit import rate_limit
from ats_tailor.core.security import require_api_key
from ats_tailor.features import match_status, suggest_keywords
from ats_tailor.schemas.tailor import (
    KeywordsRequest,
    KeywordsResponse,
    ScoreRequest,
    ScoreResponse,
    TailorRequest,
    TailorResponse,
)
from ats_tailor.services.tailor_service import (
    TailorInputError,
    rank_job_keywords,
    run_tailoring,
    score_against_job,
)

router = APIRouter(dependencies=[Depends(require_api_key)])


def _lexicon(request: Request):
    return getattr(request.app.state, "lexicon", None)


@router.post("/tailor/keywords", response_model=KeywordsResponse)
@rate_limit()
async def tailor_keywords(request: Request, payload: KeywordsRequest):
    try:
        keywords = rank_job_keywords(
            payload.job_description_text,
            max_keywords=payload.max_keywords,
            lexicon=_lexicon(request),
        )
    except TailorInputError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return KeywordsResponse(keywords=keywords)


@router.post("/tailor/score", response_model=ScoreResponse)
@rate_limit()
async def tailor_score(request: Request, payload: ScoreRequest):
    try:
        keywords, score = score_against_job(
            payload.resume_text,
            payload.job_description_text,
            max_keywords=payload.max_keywords,
            lexicon=_lexicon(request),
        )
    except TailorInputError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return ScoreResponse(
        keywords=keywords,
        score=score,
        status=match_status(score.total),
        suggestions=suggest_keywords(score.missing),
    )


@router.post("/tailor/resume", response_model=TailorResponse)
@rate_limit()
async def tailor_resume(request: Request, payload: TailorRequest):
    try:
        report = run_tailoring(
            payload.resume_text,
            payload.job_description_text,
            max_keywords=payload.max_keywords,
            seed=payload.seed,
            location=payload.location,
            first_name=payload.first_name,
            last_name=payload.last_name,
            lexicon=_lexicon(request),
        )
    except TailorInputError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return TailorResponse(
        tailored_text=report.tailored_text,
        fingerprint=report.fingerprint,
        filename=report.filename,
        score_before=report.score_before,
        score_after=report.score_after,
        status=report.status,
        coverage_percent=report.injection.coverage_percent,
        used_keywords=report.injection.used_keywords,
        missing_keywords=report.injection.missing_after_injection,
        suggestions=report.suggestions,
        warnings=report.warnings,
        elapsed_ms=report.elapsed_ms,
    )
