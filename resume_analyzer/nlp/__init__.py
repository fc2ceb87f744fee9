from .normalizer import EN_STOP_WORDS, FR_STOP_WORDS, lemmatize, normalize_text
from .skill_dictionary import SkillDictionary, get_default_skill_dictionary

__all__ = [
    "EN_STOP_WORDS",
    "FR_STOP_WORDS",
    "lemmatize",
    "normalize_text",
    "SkillDictionary",
    "get_default_skill_dictionary",
]
