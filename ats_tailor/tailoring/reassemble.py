from __future__ import annotations

import re
from collections.abc import Sequence

from ats_tailor.schemas.pipeline import ParsedResume

OUTPUT_BULLET = "•"
EXPERIENCE_MARKER = "EXPERIENCE"
_TRAILING_SECTIONS = ("skills", "technical_proficiencies", "education", "certifications")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _with_location(header: str, location: str | None) -> str:
    location = (location or "").strip()
    if not location or location.lower() in header.lower():
        return header
    lines = header.split("\n")
    insert_at = 1 if lines and lines[0].strip() else 0
    lines.insert(insert_at, location)
    return "\n".join(lines)


def reassemble(
    parsed: ParsedResume,
    rewritten_roles: Sequence[Sequence[str]],
    *,
    location: str | None = None,
) -> str:
    """Rebuild résumé text in fixed section order with rewritten bullets.

    ``rewritten_roles`` holds one list of bullet strings per parsed role, in
    the same order. A role without an entry keeps its original bullets.
    """
    sections = parsed.preserved_sections
    parts: list[str] = []

    header = sections.get("header")
    if header is not None or location:
        parts.append(_with_location(header or "", location))
    if "summary" in sections:
        parts.append(sections["summary"])

    if parsed.roles:
        parts.append(EXPERIENCE_MARKER)
        parts.extend(parsed.experience_preamble)
        for index, role in enumerate(parsed.roles):
            if index < len(rewritten_roles):
                bullets = list(rewritten_roles[index])
            else:
                bullets = [bullet.original_text for bullet in role.bullets]
            parts.append(role.header_line)
            parts.extend(role.date_lines)
            parts.extend(role.extra_lines)
            parts.extend(f"{OUTPUT_BULLET} {bullet}" for bullet in bullets)
            parts.append("")
    elif parsed.has_experience_section:
        parts.append(parsed.experience_block)

    for name in _TRAILING_SECTIONS:
        if name in sections:
            parts.append(sections[name])

    return _BLANK_RUN_RE.sub("\n\n", "\n".join(parts))


def fingerprint(text: str) -> str:
    """32-bit rolling hash (``h * 31 + c``) of ``text`` rendered in base 36."""
    value = 0
    for char in text or "":
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    value = abs(value)
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))
