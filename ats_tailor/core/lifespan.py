import logging
from contextlib import asynccontextmanager

from ats_tailor.core.config.scoring import get_scoring_config
from ats_tailor.lexicon import get_default_lexicon
from ats_tailor.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    get_scoring_config()
    lexicon = get_default_lexicon()
    get_default_taxonomy_provider()
    logger.info(
        "tailor_warmup categories=%s phrase_patterns=%s stop_words=%s",
        len(lexicon.categories),
        len(lexicon.phrase_patterns),
        len(lexicon.stop_words),
    )
    app.state.lexicon = lexicon
    yield
