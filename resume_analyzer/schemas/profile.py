from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from .skills import SkillSet


def _new_id() -> str:
    return uuid4().hex


class WorkExperience(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    company: str = ""
    role: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    responsibilities: str = ""


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    school: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""


class Volunteering(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    organization: str = ""
    role: str = ""
    description: str = ""


class LanguageProficiency(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    language: str = ""
    fluency: str = ""


class Certification(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str = ""
    issuer: str = ""
    date: str = ""


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    title: str = ""
    description: str = ""


class ContactFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    job_title: str = ""
    linkedin: str = ""
    website: str = ""
    summary: str = ""


class CandidateProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    job_title: str = ""
    linkedin: str = ""
    website: str = ""
    summary: str = ""
    language: str = "en"
    raw_text: str = ""
    skills: SkillSet = Field(default_factory=SkillSet)
    work_experiences: tuple[WorkExperience, ...] = ()
    education: tuple[Education, ...] = ()
    volunteering: tuple[Volunteering, ...] = ()
    languages: tuple[LanguageProficiency, ...] = ()
    certifications: tuple[Certification, ...] = ()
    projects: tuple[Project, ...] = ()


class ProfileBuilder:
    """Collects extraction output for one analysis run and freezes it once."""

    def __init__(self, raw_text: str, language: str) -> None:
        self.raw_text = raw_text or ""
        self.language = language
        self.contact = ContactFields()
        self.skills = SkillSet()
        self.work_experiences: list[WorkExperience] = []
        self.education: list[Education] = []
        self.volunteering: list[Volunteering] = []
        self.languages: list[LanguageProficiency] = []
        self.certifications: list[Certification] = []
        self.projects: list[Project] = []

    def build(self) -> CandidateProfile:
        return CandidateProfile(
            **self.contact.model_dump(),
            language=self.language,
            raw_text=self.raw_text,
            skills=self.skills,
            work_experiences=tuple(self.work_experiences),
            education=tuple(self.education),
            volunteering=tuple(self.volunteering),
            languages=tuple(self.languages),
            certifications=tuple(self.certifications),
            projects=tuple(self.projects),
        )
