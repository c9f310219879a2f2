"""Keyword budget allocation and fact-preserving bullet rewriting.

Each bullet receives up to ``k`` ranked keywords it does not already
mention, rendered as a short connector phrase ("leveraging A and B").
The phrase is spliced in at a clause boundary in the first half of the
bullet, or near its tail; the original characters are never edited, only
added to, so every metric and achievement survives in order.
"""

from __future__ import annotations

import logging
import math
import random
import re
from collections.abc import Iterable, Sequence

from ats_tailor.core.config.scoring import get_scoring_value
from ats_tailor.features.coverage import keyword_present
from ats_tailor.normalize.metrics import metric_spans
from ats_tailor.schemas.pipeline import Bullet, InjectionResult, KeywordCandidate, ParsedResume

logger = logging.getLogger(__name__)

CONNECTORS: tuple[str, ...] = (
    "leveraging",
    "utilizing",
    "through",
    "via",
    "employing",
    "incorporating",
    "with expertise in",
    "applying",
)

_CLAUSE_BOUNDARY_RE = re.compile(r",(?=\s)| and | while | by ", re.IGNORECASE)
_TRAILING_PERIOD_RE = re.compile(r"\.?\s*$")
_SENTENCE_END_RE = re.compile(r"\.(?=\s|$)")


def keyword_budget(keyword_count: int, total_bullets: int) -> int:
    minimum = int(get_scoring_value("injector.min_keywords_per_bullet", 2))
    return max(minimum, math.ceil(keyword_count / max(1, total_bullets)))


def render_phrase(terms: Sequence[str]) -> str:
    if not terms:
        return ""
    if len(terms) == 1:
        return terms[0]
    if len(terms) == 2:
        return f"{terms[0]} and {terms[1]}"
    return f"{', '.join(terms[:-1])}, and {terms[-1]}"


def _mentions(bullet_lower: str, keyword: KeywordCandidate) -> bool:
    return keyword.normalized_key in bullet_lower or keyword.term.lower() in bullet_lower


def _inside_metric(text: str, offset: int) -> bool:
    return any(start < offset < end for start, end in metric_spans(text))


def _clause_split(text: str, insertion: str) -> str | None:
    min_offset = int(get_scoring_value("injector.clause_min_offset", 15))
    half = len(text) / 2
    for match in _CLAUSE_BOUNDARY_RE.finditer(text):
        offset = match.start()
        if offset >= half:
            break
        if offset <= min_offset or _inside_metric(text, offset):
            continue
        return f"{text[:offset]} {insertion}{text[offset:]}"
    return None


def _tail_insert(text: str, insertion: str) -> str:
    min_offset = int(get_scoring_value("injector.tail_min_offset", 20))
    last_percent = text.rfind("%")
    if last_percent > -1:
        position = text.rfind(" ", 0, last_percent)
    else:
        sentence_ends = [match.start() for match in _SENTENCE_END_RE.finditer(text)]
        position = sentence_ends[-1] if sentence_ends else len(text)

    if position > min_offset and not _inside_metric(text, position):
        return f"{text[:position].rstrip()}, {insertion}{text[position:]}"
    return f"{_TRAILING_PERIOD_RE.sub('', text)} {insertion}."


def _is_subsequence(needle: str, haystack: str) -> bool:
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def preserves_facts(original: Bullet, rewritten: str) -> bool:
    """Original text (minus a trailing period) is a subsequence and every metric survives in order."""
    if not _is_subsequence(_TRAILING_PERIOD_RE.sub("", original.original_text), rewritten):
        return False
    cursor = 0
    # Metrics are reported by family; compare them in reading order.
    for metric in sorted(original.extracted_metrics, key=original.original_text.find):
        found = rewritten.find(metric, cursor)
        if found < 0:
            return False
        cursor = found + len(metric)
    return True


def inject_keywords(bullet: Bullet, terms: Sequence[str], connector: str) -> str:
    """Splice ``connector`` + rendered ``terms`` into the bullet text."""
    text = bullet.original_text
    phrase = render_phrase(terms)
    if not phrase:
        return text
    insertion = f"{connector} {phrase}"

    rewritten = _clause_split(text, insertion)
    if rewritten is None or not preserves_facts(bullet, rewritten):
        rewritten = _tail_insert(text, insertion)
    if not preserves_facts(bullet, rewritten):
        rewritten = f"{_TRAILING_PERIOD_RE.sub('', text)} {insertion}."
    return rewritten


class KeywordInjector:
    """Distribute ranked keywords across every bullet of a parsed résumé.

    ``rng`` drives the connector choice only; pass a seeded
    :class:`random.Random` (or ``seed``) for reproducible output.
    """

    def __init__(self, *, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def tailor(
        self,
        parsed: ParsedResume,
        ranked_keywords: Sequence[KeywordCandidate],
        *,
        found_keys: Iterable[str] = (),
    ) -> InjectionResult:
        """Rewrite every bullet.

        ``found_keys`` are keywords the whole résumé already contains (any
        section); they count toward coverage before any bullet is touched.
        """
        keywords = list(ranked_keywords or [])
        total_bullets = parsed.total_bullets
        budget = keyword_budget(len(keywords), total_bullets)

        ranked_keys = {keyword.normalized_key for keyword in keywords}
        used: dict[str, None] = dict.fromkeys(key for key in found_keys if key in ranked_keys)
        injected: dict[str, None] = {}
        rewritten_roles: list[list[str]] = []
        flat: list[str] = []
        bullets_modified = 0
        keywords_injected = 0

        for role in parsed.roles:
            role_bullets: list[str] = []
            for bullet in role.bullets:
                bullet_lower = bullet.original_text.lower()
                available: list[KeywordCandidate] = []
                for keyword in keywords:
                    if not _mentions(bullet_lower, keyword):
                        available.append(keyword)
                    elif keyword_present(bullet.original_text, keyword):
                        used.setdefault(keyword.normalized_key)

                chosen = available[:budget]
                if not chosen:
                    role_bullets.append(bullet.original_text)
                    continue

                connector = self.rng.choice(CONNECTORS)
                text = inject_keywords(bullet, [keyword.term for keyword in chosen], connector)
                for keyword in chosen:
                    used.setdefault(keyword.normalized_key)
                    injected.setdefault(keyword.normalized_key)
                bullets_modified += 1
                keywords_injected += len(chosen)
                role_bullets.append(text)
            rewritten_roles.append(role_bullets)
            flat.extend(role_bullets)

        missing = [keyword for keyword in keywords if keyword.normalized_key not in used]
        coverage = 0
        if keywords:
            coverage = int(math.floor(100 * (len(keywords) - len(missing)) / len(keywords) + 0.5))

        logger.debug(
            "keywords_injected bullets=%s budget=%s modified=%s coverage=%s",
            total_bullets,
            budget,
            bullets_modified,
            coverage,
        )
        return InjectionResult(
            rewritten_bullets=flat,
            rewritten_roles=rewritten_roles,
            used_keywords=list(used),
            injected_keywords=list(injected),
            coverage_percent=coverage,
            missing_after_injection=missing,
            bullets_modified=bullets_modified,
            keywords_injected=keywords_injected,
            budget_per_bullet=budget,
        )


def tailor_bullets(
    parsed: ParsedResume,
    ranked_keywords: Sequence[KeywordCandidate],
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    found_keys: Iterable[str] = (),
) -> InjectionResult:
    return KeywordInjector(rng=rng, seed=seed).tailor(parsed, ranked_keywords, found_keys=found_keys)
