from __future__ import annotations

import logging
import threading

from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import AnalysisCancelledError
from resume_analyzer.extraction import (
    extract_certifications,
    extract_education,
    extract_languages,
    extract_profile,
    extract_projects,
    extract_section_skills,
    extract_volunteering,
    extract_work_experience,
)
from resume_analyzer.nlp import SkillDictionary, get_default_skill_dictionary, normalize_text
from resume_analyzer.schemas import (
    AnalysisResult,
    AnalyzeRequest,
    ContactFields,
    JobDescription,
    ProfileBuilder,
    SkillSet,
)
from resume_analyzer.scoring import (
    build_suggestions,
    calculate_ats_score,
    calculate_compatibility,
    compare_skills,
    map_level,
)
from resume_analyzer.semantic import SimilarityModel, get_similarity_model

logger = logging.getLogger(__name__)


def _checkpoint(cancel_event: threading.Event | None, step: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise AnalysisCancelledError(step)


def analyze_resume(
    request: AnalyzeRequest,
    *,
    skill_dictionary: SkillDictionary | None = None,
    similarity_model: SimilarityModel | None = None,
    cancel_event: threading.Event | None = None,
) -> AnalysisResult:
    """Score one resume against one job description and extract the candidate profile."""
    dictionary = skill_dictionary or get_default_skill_dictionary()
    model = similarity_model or get_similarity_model()
    language = request.language or settings.default_language
    resume_text = request.resume_text or ""
    job_text = request.job_description_text or ""

    builder = ProfileBuilder(raw_text=resume_text, language=language)

    _checkpoint(cancel_event, "normalize")
    resume_skills = dictionary.extract_skills(normalize_text(resume_text, language))
    job_skills = dictionary.extract_skills(normalize_text(job_text, language))
    builder.skills = builder.skills.add_names(resume_skills, category="auto")
    job = JobDescription(
        title=request.job_title,
        description_text=job_text,
        language=language,
        required_skills=SkillSet().add_names(job_skills, category="required"),
    )

    _checkpoint(cancel_event, "extract")
    builder.contact = extract_profile(
        resume_text,
        ContactFields(name=request.candidate_name, email=request.email),
    )
    builder.skills = builder.skills.add_names(extract_section_skills(resume_text), category="extracted")
    builder.work_experiences = extract_work_experience(resume_text)
    builder.education = extract_education(resume_text)
    builder.volunteering = extract_volunteering(resume_text)
    builder.languages = extract_languages(resume_text)
    builder.certifications = extract_certifications(resume_text)
    builder.projects = extract_projects(resume_text)
    profile = builder.build()

    _checkpoint(cancel_event, "score")
    comparison = compare_skills(job_skills, resume_skills)
    ats_score = calculate_ats_score(
        resume_text,
        builder.contact,
        matched_count=len(comparison.matched),
        job_skill_count=len(comparison.job_skills),
    )
    prediction = model.score_and_predict(resume_text, job_text)
    compatibility = calculate_compatibility(prediction.similarity, comparison.match_percentage)

    _checkpoint(cancel_event, "suggest")
    suggestions = build_suggestions(comparison.missing, ats_score)

    result = AnalysisResult(
        resume_id=profile.id,
        job_id=job.id,
        compatibility_score=compatibility,
        skill_match_percentage=round(comparison.match_percentage, 2),
        ats_score=ats_score,
        predicted_level=map_level(prediction.level_label),
        extracted_name=profile.name,
        extracted_email=profile.email,
        extracted_phone=profile.phone,
        extracted_job_title=profile.job_title,
        extracted_city=profile.city,
        extracted_linkedin=profile.linkedin,
        extracted_website=profile.website,
        extracted_summary=profile.summary,
        work_experiences=profile.work_experiences,
        education=profile.education,
        volunteering=profile.volunteering,
        languages=profile.languages,
        certifications=profile.certifications,
        projects=profile.projects,
        resume_text=resume_text,
        job_description_text=job_text,
        extracted_skills=tuple(profile.skills.names("auto")),
        section_skills=tuple(profile.skills.names("extracted")),
        job_skills=tuple(job.required_skills.names()),
        matched_skills=comparison.matched,
        missing_skills=comparison.missing,
        suggestions=tuple(suggestions),
    )
    logger.info(
        "analysis_complete resume_id=%s job_id=%s compatibility=%s ats=%s level=%s strategy=%s",
        result.resume_id,
        result.job_id,
        result.compatibility_score,
        result.ats_score,
        result.predicted_level.value,
        getattr(model, "name", "custom"),
    )
    return result
