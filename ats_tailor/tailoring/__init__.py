from .injector import CONNECTORS, KeywordInjector, inject_keywords, keyword_budget, render_phrase, tailor_bullets
from .reassemble import fingerprint, reassemble

__all__ = [
    "CONNECTORS",
    "KeywordInjector",
    "inject_keywords",
    "keyword_budget",
    "render_phrase",
    "tailor_bullets",
    "fingerprint",
    "reassemble",
]
