from .contact import NAME_PLACEHOLDER, extract_profile
from .entities import (
    extract_certifications,
    extract_education,
    extract_languages,
    extract_projects,
    extract_section_skills,
    extract_volunteering,
    extract_work_experience,
)
from .sections import extract_section

__all__ = [
    "NAME_PLACEHOLDER",
    "extract_profile",
    "extract_section",
    "extract_work_experience",
    "extract_education",
    "extract_volunteering",
    "extract_languages",
    "extract_certifications",
    "extract_projects",
    "extract_section_skills",
]
