from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report liveness and whether the keyword lexicon is loaded.")
async def health_check(request: Request):
    lexicon = getattr(request.app.state, "lexicon", None)
    return {
        "status": "healthy",
        "lexicon_loaded": lexicon is not None,
        "categories": list(lexicon.category_names()) if lexicon is not None else [],
    }
