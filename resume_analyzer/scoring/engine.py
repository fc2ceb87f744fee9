from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.extraction.contact import NAME_PLACEHOLDER
from resume_analyzer.schemas import CandidateLevel, ContactFields, canonical_skill_name


@dataclass(frozen=True)
class SkillComparison:
    job_skills: tuple[str, ...]
    resume_skills: tuple[str, ...]
    matched: tuple[str, ...]
    missing: tuple[str, ...]

    @property
    def match_percentage(self) -> float:
        if not self.job_skills:
            return 0.0
        return len(self.matched) / len(self.job_skills) * 100.0


def compare_skills(job_skills: Sequence[str], resume_skills: Sequence[str]) -> SkillComparison:
    """Split job skills into matched/missing against the resume, ignoring case."""
    resume_keys = {canonical_skill_name(skill) for skill in resume_skills}
    matched: list[str] = []
    missing: list[str] = []
    for skill in job_skills:
        (matched if canonical_skill_name(skill) in resume_keys else missing).append(skill)
    return SkillComparison(
        job_skills=tuple(job_skills),
        resume_skills=tuple(resume_skills),
        matched=tuple(matched),
        missing=tuple(missing),
    )


def _points(name: str, default: float) -> float:
    return float(get_scoring_value(name, default))


def _skill_points(matched_count: int, job_skill_count: int) -> float:
    if job_skill_count <= 0:
        return _points("ats.weights.skills_without_job_skills", 20)
    return matched_count / job_skill_count * _points("ats.weights.skills", 40)


def _contact_points(contact: ContactFields) -> float:
    score = 0.0
    if contact.email:
        score += _points("ats.contact_points.email", 7)
    if contact.name and contact.name != NAME_PLACEHOLDER:
        score += _points("ats.contact_points.name", 7)
    if contact.phone:
        score += _points("ats.contact_points.phone", 3)
    if contact.linkedin:
        score += _points("ats.contact_points.linkedin", 3)
    return score


def _length_points(raw_text: str) -> float:
    word_count = len(raw_text.split())
    full_min = int(get_scoring_value("ats.word_count.full_min", 300))
    full_max = int(get_scoring_value("ats.word_count.full_max", 1000))
    partial_min = int(get_scoring_value("ats.word_count.partial_min", 100))
    partial_max = int(get_scoring_value("ats.word_count.partial_max", 1500))
    if full_min <= word_count <= full_max:
        return _points("ats.weights.length", 20)
    if partial_min < word_count < partial_max:
        return _points("ats.weights.length_partial", 10)
    return 0.0


def _heading_points(raw_text: str) -> float:
    headings = get_scoring_value("ats.headings", []) or []
    if not headings:
        return 0.0
    lowered = raw_text.lower()
    found = sum(1 for heading in headings if str(heading).lower() in lowered)
    return found / len(headings) * _points("ats.weights.headings", 20)


def calculate_ats_score(
    raw_text: str,
    contact: ContactFields,
    matched_count: int,
    job_skill_count: int,
) -> float:
    raw = raw_text or ""
    score = (
        _skill_points(matched_count, job_skill_count)
        + _contact_points(contact)
        + _length_points(raw)
        + _heading_points(raw)
    )
    return round(min(100.0, max(0.0, score)), 2)


def calculate_compatibility(similarity: float, skill_match_percentage: float) -> float:
    similarity_weight = _points("compatibility.similarity_weight", 0.6)
    skill_weight = _points("compatibility.skill_match_weight", 0.4)
    score = similarity * 100.0 * similarity_weight + skill_match_percentage * skill_weight
    return round(min(100.0, max(0.0, score)), 2)


_LEVELS_BY_LABEL = {level.value.lower(): level for level in CandidateLevel}


def map_level(label: str | None) -> CandidateLevel:
    return _LEVELS_BY_LABEL.get((label or "").strip().lower(), CandidateLevel.REJECT)
