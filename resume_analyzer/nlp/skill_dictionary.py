from __future__ import annotations

import json
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from .normalizer import lemmatize


class SkillDictionary:
    def __init__(self, terms: Iterable[str] | None = None, vocabulary_path: str | Path | None = None) -> None:
        if terms is None:
            path = Path(vocabulary_path) if vocabulary_path else Path(__file__).with_name("skills.json")
            terms = self._load_terms(path)
        self._lookup: dict[str, str] = {}
        for term in terms:
            canonical = term.strip().lower()
            if not canonical:
                continue
            self._lookup.setdefault(canonical, canonical)
            # tokens reach us suffix-stripped, e.g. "kubernetes" -> "kubernete"
            self._lookup.setdefault(lemmatize(canonical), canonical)

    @staticmethod
    def _load_terms(path: Path) -> list[str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return [str(item) for item in raw]

    @property
    def terms(self) -> frozenset[str]:
        return frozenset(self._lookup.values())

    def canonicalize(self, token: str) -> str | None:
        return self._lookup.get(token.strip().lower())

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.canonicalize(token) is not None

    def extract_skills(self, tokens: Iterable[str]) -> list[str]:
        found: list[str] = []
        seen: set[str] = set()
        for token in tokens:
            canonical = self.canonicalize(token)
            if canonical is None or canonical in seen:
                continue
            seen.add(canonical)
            found.append(canonical)
        return found


@lru_cache(maxsize=1)
def get_default_skill_dictionary() -> SkillDictionary:
    return SkillDictionary()
