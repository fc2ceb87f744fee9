from __future__ import annotations

from collections.abc import Sequence

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas import Suggestion

SKILLS_SECTION = "Skills"
EXPERIENCE_SECTION = "Experience"
ATS_SECTION = "ATS Optimization"


def build_suggestions(missing_skills: Sequence[str], ats_score: float) -> list[Suggestion]:
    """Remediation items: one skills item, a few experience nudges, one ATS item."""
    max_listed = int(get_scoring_value("suggestions.max_missing_skills_listed", 5))
    experience_count = int(get_scoring_value("suggestions.experience_suggestions", 2))
    threshold = float(get_scoring_value("suggestions.low_ats_threshold", 70))

    suggestions: list[Suggestion] = []
    if missing_skills:
        listed = list(missing_skills)[:max_listed]
        suggestions.append(
            Suggestion(
                section=SKILLS_SECTION,
                original_text="Existing skills list",
                suggested_text=f"Add the following skills: {', '.join(listed)}",
                reason="These skills are required or preferred in the job description but missing from your resume.",
            )
        )
        for skill in list(missing_skills)[:experience_count]:
            suggestions.append(
                Suggestion(
                    section=EXPERIENCE_SECTION,
                    original_text="Work experience",
                    suggested_text=f"Mention your experience with {skill} in a recent project.",
                    reason=f"Highlighting {skill} in your experience section will improve your match score.",
                )
            )

    if ats_score < threshold:
        suggestions.append(
            Suggestion(
                section=ATS_SECTION,
                original_text="Resume structure",
                suggested_text="Improve resume formatting and contact information.",
                reason=(
                    "Your ATS score is low. Use clear section headings and include all contact "
                    "details (phone, email, LinkedIn)."
                ),
            )
        )
    return suggestions
