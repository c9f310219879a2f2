from __future__ import annotations

from typing import Protocol


class TermNormalizer(Protocol):
    def normalize_term(self, raw: str) -> tuple[str, str | None]:
        """Return normalized text and optional canonical key."""
