from .engine import (
    SkillComparison,
    calculate_ats_score,
    calculate_compatibility,
    compare_skills,
    map_level,
)
from .suggestions import build_suggestions

__all__ = [
    "SkillComparison",
    "calculate_ats_score",
    "calculate_compatibility",
    "compare_skills",
    "map_level",
    "build_suggestions",
]
