from functools import lru_cache

from .local_taxonomy import LocalTaxonomy, fold_term
from .provider import TermNormalizer


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> LocalTaxonomy:
    return LocalTaxonomy()


__all__ = ["TermNormalizer", "LocalTaxonomy", "fold_term", "get_default_taxonomy_provider"]
