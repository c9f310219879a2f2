from __future__ import annotations

import json
import re
from pathlib import Path

from .provider import TermNormalizer

_HYPHEN_RE = re.compile(r"\s*-\s*")
_SPACE_RE = re.compile(r"\s+")


def fold_term(raw: str) -> str:
    """Lowercase, treat hyphens as spaces and collapse whitespace."""
    folded = _HYPHEN_RE.sub(" ", (raw or "").strip().lower())
    return _SPACE_RE.sub(" ", folded).strip()


class LocalTaxonomy(TermNormalizer):
    def __init__(self, synonyms_path: str | Path | None = None) -> None:
        path = Path(synonyms_path) if synonyms_path else Path(__file__).with_name("synonyms.json")
        self._synonyms = self._load_synonyms(path)

    @staticmethod
    def _load_synonyms(path: Path) -> dict[str, str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return {fold_term(str(key)): fold_term(str(value)) for key, value in raw.items()}

    def normalize_term(self, raw: str) -> tuple[str, str | None]:
        normalized = fold_term(raw)
        return normalized, self._synonyms.get(normalized)

    def canonical_key(self, raw: str) -> str:
        normalized, canonical = self.normalize_term(raw)
        return canonical or normalized
