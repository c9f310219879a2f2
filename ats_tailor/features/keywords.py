from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ats_tailor.lexicon import Lexicon, get_default_lexicon
from ats_tailor.schemas.pipeline import KeywordCandidate
from ats_tailor.taxonomy import LocalTaxonomy, get_default_taxonomy_provider

logger = logging.getLogger(__name__)

# Words keep inner symbols so c++, c#, node.js and ci/cd stay whole.
_TOKEN_RE = re.compile(r"(?<![a-z0-9])\.net\b|[a-z][a-z0-9+#./-]*", re.IGNORECASE)
_TRAILING_PUNCT = ".-/"


@dataclass(slots=True)
class _Tally:
    term: str
    first_seen: int
    frequency: int = 0
    is_phrase: bool = False


class KeywordExtractor:
    """Rank the weighted keywords of a job description.

    Single words are counted (stop words and very short tokens dropped),
    domain phrases from the lexicon add their own candidates with a
    frequency bonus, and every candidate is weighted by the first lexicon
    category whose pattern matches its canonical key.
    """

    def __init__(self, lexicon: Lexicon | None = None, taxonomy: LocalTaxonomy | None = None) -> None:
        self.lexicon = lexicon or get_default_lexicon()
        self.taxonomy = taxonomy or get_default_taxonomy_provider()

    def extract(self, job_text: str, max_keywords: int = 40) -> list[KeywordCandidate]:
        if not isinstance(job_text, str) or not job_text.strip():
            return []
        if not isinstance(max_keywords, int) or max_keywords <= 0:
            return []

        tallies: dict[str, _Tally] = {}
        phrase_spans = self._count_phrases(job_text, tallies)
        self._count_tokens(job_text, tallies, phrase_spans)

        candidates = [self._score(key, tally) for key, tally in tallies.items()]
        candidates.sort(key=lambda item: (-item.score, item.first_seen))
        ranked = candidates[:max_keywords]
        logger.debug(
            "keywords_extracted candidates=%s kept=%s top=%s",
            len(candidates),
            len(ranked),
            [item.normalized_key for item in ranked[:5]],
        )
        return ranked

    def _count_phrases(self, text: str, tallies: dict[str, _Tally]) -> set[tuple[int, int]]:
        spans: set[tuple[int, int]] = set()
        for pattern in self.lexicon.phrase_patterns:
            for match in pattern.finditer(text):
                if match.span() in spans:
                    continue
                key = self.taxonomy.canonical_key(match.group(0))
                if not key:
                    continue
                spans.add(match.span())
                tally = tallies.get(key)
                if tally is None:
                    tally = tallies[key] = _Tally(term=match.group(0), first_seen=match.start())
                elif match.start() < tally.first_seen:
                    tally.first_seen = match.start()
                    tally.term = match.group(0)
                tally.frequency += 1
                tally.is_phrase = True
        return spans

    def _count_tokens(
        self,
        text: str,
        tallies: dict[str, _Tally],
        phrase_spans: set[tuple[int, int]],
    ) -> None:
        for start, surface in self._tokens(text):
            if (start, start + len(surface)) in phrase_spans:
                continue
            token = surface.lower()
            if len(token) < self.lexicon.min_token_length or self.lexicon.is_stop_word(token):
                continue
            key = self.taxonomy.canonical_key(token)
            if not key or self.lexicon.is_stop_word(key):
                continue
            tally = tallies.get(key)
            if tally is None:
                tallies[key] = _Tally(term=surface, first_seen=start, frequency=1)
                continue
            tally.frequency += 1
            if start < tally.first_seen:
                tally.first_seen = start
                tally.term = surface

    def _tokens(self, text: str) -> list[tuple[int, str]]:
        tokens: list[tuple[int, str]] = []
        for match in _TOKEN_RE.finditer(text):
            surface = match.group(0).rstrip(_TRAILING_PUNCT)
            if not surface:
                continue
            if "/" in surface and not self._is_known(surface):
                # and/or, frontend/backend: count each side on its own.
                offset = match.start()
                for raw_part in surface.split("/"):
                    part = raw_part.rstrip(_TRAILING_PUNCT)
                    if part and part[0].isalpha():
                        tokens.append((offset, part))
                    offset += len(raw_part) + 1
                continue
            tokens.append((match.start(), surface))
        return tokens

    def _is_known(self, surface: str) -> bool:
        category, _ = self.lexicon.categorize(self.taxonomy.canonical_key(surface))
        return category != "general"

    def _score(self, key: str, tally: _Tally) -> KeywordCandidate:
        category, weight = self.lexicon.categorize(key)
        bonus = self.lexicon.phrase_bonus if tally.is_phrase else 0
        return KeywordCandidate(
            term=tally.term,
            normalized_key=key,
            category=category,
            weight=weight,
            frequency=tally.frequency,
            score=round((tally.frequency + bonus) * weight, 4),
            is_phrase=tally.is_phrase,
            first_seen=tally.first_seen,
        )


def extract_keywords(
    job_text: str,
    max_keywords: int = 40,
    *,
    lexicon: Lexicon | None = None,
) -> list[KeywordCandidate]:
    return KeywordExtractor(lexicon=lexicon).extract(job_text, max_keywords)
