from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .profile import (
    Certification,
    Education,
    LanguageProficiency,
    Project,
    Volunteering,
    WorkExperience,
)


class CandidateLevel(str, Enum):
    REJECT = "Reject"
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    section: str
    original_text: str
    suggested_text: str
    reason: str


class AnalyzeRequest(BaseModel):
    candidate_name: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=320)
    job_title: str = Field(default="", max_length=200)
    job_description_text: str = Field(default="", max_length=50000)
    resume_text: str = Field(default="", max_length=50000)
    language: str | None = Field(default=None, min_length=2, max_length=10)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume_id: str
    job_id: str
    compatibility_score: float = Field(ge=0.0, le=100.0)
    skill_match_percentage: float = Field(ge=0.0, le=100.0)
    ats_score: float = Field(ge=0.0, le=100.0)
    predicted_level: CandidateLevel
    extracted_name: str = ""
    extracted_email: str = ""
    extracted_phone: str = ""
    extracted_job_title: str = ""
    extracted_city: str = ""
    extracted_linkedin: str = ""
    extracted_website: str = ""
    extracted_summary: str = ""
    work_experiences: tuple[WorkExperience, ...] = ()
    education: tuple[Education, ...] = ()
    volunteering: tuple[Volunteering, ...] = ()
    languages: tuple[LanguageProficiency, ...] = ()
    certifications: tuple[Certification, ...] = ()
    projects: tuple[Project, ...] = ()
    resume_text: str = ""
    job_description_text: str = ""
    extracted_skills: tuple[str, ...] = ()
    section_skills: tuple[str, ...] = ()
    job_skills: tuple[str, ...] = ()
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    suggestions: tuple[Suggestion, ...] = ()
