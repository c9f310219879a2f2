from __future__ import annotations

import re

_BULLET_CHARS = "-•*▪▸"
_BULLET_PATTERN = re.compile(rf"^[{re.escape(_BULLET_CHARS)}]\s")
_BULLET_PREFIX = re.compile(rf"^[{re.escape(_BULLET_CHARS)}]\s*")
_DATE_RANGE_RE = re.compile(
    r"^[A-Za-z]+\.?\s+\d{4}\s*[-–—]\s*(?:present|current|now|[A-Za-z]+\.?\s+\d{4})",
    re.IGNORECASE,
)
_ROLE_HEADER_RE = re.compile(r"^([A-Z][A-Za-z\s&.,]+)\s*\|\s*(.+?)\s*\|?\s*$")

SECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("experience", re.compile(r"^(?:EXPERIENCE|WORK\s*EXPERIENCE|EMPLOYMENT|PROFESSIONAL\s*EXPERIENCE)[\s:]*$", re.IGNORECASE)),
    ("skills", re.compile(r"^(?:SKILLS|TECHNICAL\s*SKILLS|CORE\s*SKILLS)[\s:]*$", re.IGNORECASE)),
    ("education", re.compile(r"^(?:EDUCATION|ACADEMIC|QUALIFICATIONS)[\s:]*$", re.IGNORECASE)),
    ("certifications", re.compile(r"^(?:CERTIFICATIONS?|LICENSES?)[\s:]*$", re.IGNORECASE)),
    ("summary", re.compile(r"^(?:PROFESSIONAL\s*SUMMARY|SUMMARY|PROFILE|OBJECTIVE)[\s:]*$", re.IGNORECASE)),
    ("technical_proficiencies", re.compile(r"^TECHNICAL\s*PROFICIENCIES[\s:]*$", re.IGNORECASE)),
)


def section_for_heading(line: str) -> str | None:
    stripped = line.strip()
    if not stripped:
        return None
    for name, pattern in SECTION_PATTERNS:
        if pattern.match(stripped):
            return name
    return None


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line.strip()))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PREFIX.sub("", line.strip(), count=1)


def is_date_line(line: str) -> bool:
    return bool(_DATE_RANGE_RE.match(line.strip()))


def split_role_header(line: str) -> tuple[str, str] | None:
    """Return ``(company, title)`` for a ``Company | Title`` line."""
    match = _ROLE_HEADER_RE.match(line.strip())
    if not match:
        return None
    company = match.group(1).strip()
    title = match.group(2).split("|")[0].strip()
    return company, title
