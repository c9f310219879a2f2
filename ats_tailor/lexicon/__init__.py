"""Process-wide, read-only keyword vocabulary.

A :class:`Lexicon` is built once (see :func:`get_default_lexicon`) and
passed to the extractor. Nothing mutates it after construction, so one
instance can be shared by any number of concurrent pipeline runs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from ats_tailor.core.config.scoring import get_scoring_value

from .tables import CATEGORY_ORDER, CATEGORY_TERMS, PHRASE_PATTERNS, STOP_WORDS

_DEFAULT_WEIGHTS = {
    "technical": 3.0,
    "skills": 2.5,
    "certifications": 2.0,
    "action_verbs": 1.5,
    "industry": 1.0,
}


@dataclass(frozen=True, slots=True)
class CategoryRule:
    name: str
    weight: float
    pattern: re.Pattern[str]

    def matches(self, key: str) -> bool:
        return bool(self.pattern.fullmatch(key))


@dataclass(frozen=True, slots=True)
class Lexicon:
    categories: tuple[CategoryRule, ...]
    phrase_patterns: tuple[re.Pattern[str], ...]
    stop_words: frozenset[str]
    general_weight: float = 1.0
    phrase_bonus: int = 2
    min_token_length: int = 3

    def categorize(self, key: str) -> tuple[str, float]:
        """Return ``(category, weight)`` for a canonical key; first rule wins."""
        for rule in self.categories:
            if rule.matches(key):
                return rule.name, rule.weight
        return "general", self.general_weight

    def is_stop_word(self, token: str) -> bool:
        return token in self.stop_words

    def category_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.categories)


def _compile_category(terms: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("(?:" + "|".join(f"(?:{alt})" for alt in terms) + ")")


def build_lexicon(
    *,
    weights: dict[str, float] | None = None,
    extra_stop_words: frozenset[str] | set[str] | None = None,
) -> Lexicon:
    resolved: dict[str, float] = {}
    for name in CATEGORY_ORDER:
        default = _DEFAULT_WEIGHTS[name]
        configured = get_scoring_value(f"lexicon.weights.{name}", default)
        resolved[name] = float((weights or {}).get(name, configured))
        if resolved[name] <= 0:
            raise ValueError(f"lexicon weight for '{name}' must be positive")

    categories = tuple(
        CategoryRule(name=name, weight=resolved[name], pattern=_compile_category(CATEGORY_TERMS[name]))
        for name in CATEGORY_ORDER
    )
    stop_words = STOP_WORDS | frozenset(extra_stop_words or ())
    return Lexicon(
        categories=categories,
        phrase_patterns=tuple(re.compile(pattern, re.IGNORECASE) for pattern in PHRASE_PATTERNS),
        stop_words=stop_words,
        general_weight=float(get_scoring_value("lexicon.weights.general", 1.0)),
        phrase_bonus=int(get_scoring_value("lexicon.phrase_bonus", 2)),
        min_token_length=int(get_scoring_value("lexicon.min_token_length", 3)),
    )


@lru_cache(maxsize=1)
def get_default_lexicon() -> Lexicon:
    return build_lexicon()


__all__ = ["CategoryRule", "Lexicon", "build_lexicon", "get_default_lexicon"]
