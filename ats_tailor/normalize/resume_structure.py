"""Line-oriented parser that splits résumé text into preserved sections and roles.

Headings switch the active section and are kept verbatim inside it. Inside
the experience section a second pass recognizes role headers
(``Company | Title``), date-range lines and bullet lines. Nothing is
rejected: text before the first heading, or text with no headings at all,
lands in the ``header`` section.
"""

from __future__ import annotations

import logging

from ats_tailor.schemas.pipeline import Bullet, ParsedResume, Role

from .metrics import extract_metrics
from .utils import (
    is_bullet_like,
    is_date_line,
    section_for_heading,
    split_role_header,
    strip_bullet_prefix,
)

logger = logging.getLogger(__name__)

_PRESERVED = ("header", "summary", "skills", "technical_proficiencies", "education", "certifications")
_MIN_ROLE_HEADER_LENGTH = 10


def make_bullet(text: str) -> Bullet:
    return Bullet(original_text=text, extracted_metrics=tuple(extract_metrics(text)))


def _is_role_header(trimmed: str, *, first_in_section: bool) -> tuple[bool, tuple[str, str] | None]:
    parts = split_role_header(trimmed)
    if parts is not None:
        return True, parts
    loose = (
        len(trimmed) > _MIN_ROLE_HEADER_LENGTH
        and "|" in trimmed
        and not first_in_section
        and not is_bullet_like(trimmed)
        and not is_date_line(trimmed)
    )
    return loose, None


def parse_resume(resume_text: str) -> ParsedResume:
    if not isinstance(resume_text, str) or not resume_text:
        return ParsedResume()

    sections: dict[str, list[str]] = {name: [] for name in (*_PRESERVED, "experience")}
    roles: list[Role] = []
    preamble: list[str] = []
    current_section = "header"
    current_role: Role | None = None
    has_experience = False
    lines_in_section = 0

    def close_role() -> None:
        nonlocal current_role
        if current_role is not None:
            roles.append(current_role)
            current_role = None

    for line in resume_text.splitlines():
        trimmed = line.strip()

        heading = section_for_heading(trimmed)
        if heading is not None:
            current_section = heading
            sections[heading].append(line)
            lines_in_section = 0
            if heading == "experience":
                has_experience = True
            continue

        sections[current_section].append(line)
        first_in_section = lines_in_section == 0
        lines_in_section += 1
        if current_section != "experience":
            continue

        is_header, parts = _is_role_header(trimmed, first_in_section=first_in_section)
        if is_header:
            close_role()
            company, title = parts if parts is not None else ("", "")
            current_role = Role(header_line=trimmed, company=company, title=title)
        elif current_role is None:
            if trimmed:
                preamble.append(trimmed)
        elif is_date_line(trimmed):
            current_role.date_lines.append(trimmed)
        elif is_bullet_like(trimmed):
            current_role.bullets.append(make_bullet(strip_bullet_prefix(trimmed)))
        elif trimmed:
            current_role.extra_lines.append(trimmed)

    close_role()

    preserved = {name: "\n".join(sections[name]) for name in _PRESERVED if sections[name]}
    parsed = ParsedResume(
        preserved_sections=preserved,
        experience_block="\n".join(sections["experience"]),
        experience_preamble=preamble if roles else [],
        has_experience_section=has_experience,
        roles=roles,
    )
    logger.debug(
        "resume_parsed sections=%s roles=%s bullets=%s",
        sorted(preserved),
        len(roles),
        parsed.total_bullets,
    )
    return parsed
