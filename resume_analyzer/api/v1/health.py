from fastapi import APIRouter

from resume_analyzer.nlp import get_default_skill_dictionary
from resume_analyzer.semantic import get_similarity_model

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and the active analysis setup.")
async def health_check():
    return {
        "status": "healthy",
        "similarity_strategy": get_similarity_model().name,
        "skill_terms": len(get_default_skill_dictionary().terms),
    }
