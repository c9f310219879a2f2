from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SectionName = Literal[
    "header",
    "summary",
    "experience",
    "skills",
    "technical_proficiencies",
    "education",
    "certifications",
]


class Bullet(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_text: str
    extracted_metrics: tuple[str, ...] = ()


class Role(BaseModel):
    header_line: str
    company: str = ""
    title: str = ""
    date_lines: list[str] = Field(default_factory=list)
    extra_lines: list[str] = Field(default_factory=list)
    bullets: list[Bullet] = Field(default_factory=list)


class ParsedResume(BaseModel):
    preserved_sections: dict[SectionName, str] = Field(default_factory=dict)
    experience_block: str = ""
    experience_preamble: list[str] = Field(default_factory=list)
    has_experience_section: bool = False
    roles: list[Role] = Field(default_factory=list)

    @property
    def total_bullets(self) -> int:
        return sum(len(role.bullets) for role in self.roles)
