from .analysis import AnalysisResult, AnalyzeRequest, CandidateLevel, Suggestion
from .job import JobDescription
from .profile import (
    CandidateProfile,
    Certification,
    ContactFields,
    Education,
    LanguageProficiency,
    ProfileBuilder,
    Project,
    Volunteering,
    WorkExperience,
)
from .skills import Skill, SkillSet, canonical_skill_name

__all__ = [
    "AnalysisResult",
    "AnalyzeRequest",
    "CandidateLevel",
    "Suggestion",
    "JobDescription",
    "CandidateProfile",
    "ContactFields",
    "ProfileBuilder",
    "WorkExperience",
    "Education",
    "Volunteering",
    "LanguageProficiency",
    "Certification",
    "Project",
    "Skill",
    "SkillSet",
    "canonical_skill_name",
]
