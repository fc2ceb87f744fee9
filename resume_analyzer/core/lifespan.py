from contextlib import asynccontextmanager
import logging

from resume_analyzer.core.config.scoring import get_scoring_config
from resume_analyzer.nlp import get_default_skill_dictionary
from resume_analyzer.semantic import get_similarity_model

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    get_scoring_config()
    dictionary = get_default_skill_dictionary()
    model = get_similarity_model()
    logger.info("analyzer_ready skills=%d similarity_strategy=%s", len(dictionary.terms), model.name)
    yield
