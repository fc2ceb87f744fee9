from __future__ import annotations

import re
from collections.abc import Iterator

# Keeps skill-forming symbols such as "c#", "c++" and "node.js" intact.
_NON_TOKEN_CHARS = re.compile(r"[^\w\s#+.]|_")

EN_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "of", "to", "in", "on", "for", "with", "at",
        "from", "by", "as", "is", "are", "was", "were", "be", "been", "it", "its",
        "this", "that", "i", "we", "you", "our", "your", "my",
    }
)

FR_STOP_WORDS = frozenset(
    {
        "le", "la", "les", "un", "une", "et", "ou", "de", "des", "du", "en", "dans",
        "pour", "avec", "par", "est", "sont", "étais", "au", "aux", "sur", "je",
        "nous", "vous", "il", "elle", "ce", "cette", "mon", "ma", "mes",
    }
)


def stop_words_for(language: str | None) -> frozenset[str]:
    if (language or "").strip().lower().startswith("fr"):
        return FR_STOP_WORDS
    return EN_STOP_WORDS


def lemmatize(token: str) -> str:
    if not token.isalpha():
        return token
    if token.endswith("ing") and len(token) > 4:
        return token[:-3]
    if token.endswith("ed") and len(token) > 3:
        return token[:-2]
    if token.endswith("s") and len(token) > 3:
        return token[:-1]
    return token


def _clean_token(token: str) -> str:
    token = token.rstrip(".")
    if token.startswith("."):
        # ".net" survives, stray leading dots do not
        if len(token) < 2 or not token[1].isalpha():
            token = token.lstrip(".")
    if not any(char.isalnum() for char in token):
        return ""
    return token


def normalize_text(text: str, language: str | None = "en") -> Iterator[str]:
    """Yield lower-cased, stop-word-free, suffix-stripped tokens for ``text``."""
    if not text or not text.strip():
        return
    stop_words = stop_words_for(language)
    lowered = _NON_TOKEN_CHARS.sub(" ", text.lower())
    for raw in lowered.split():
        token = _clean_token(raw)
        if not token or token in stop_words:
            continue
        token = lemmatize(token)
        if len(token) > 1:
            yield token
