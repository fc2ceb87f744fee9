from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field

from .skills import SkillSet


class JobDescription(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str = ""
    description_text: str = ""
    language: str = "en"
    required_skills: SkillSet = Field(default_factory=SkillSet)
