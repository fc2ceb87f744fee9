from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


def canonical_skill_name(name: str) -> str:
    return name.strip().lower()


class Skill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: str = "auto"
    weight: int = 1


class SkillSet(BaseModel):
    """Immutable skills keyed by canonical name; the first casing seen is kept for display.

    ``add`` and ``add_names`` return a new set. Adding a name that is already
    present returns the set unchanged.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[Skill, ...] = Field(default_factory=tuple)

    @field_validator("items")
    @classmethod
    def _drop_duplicates(cls, items: tuple[Skill, ...]) -> tuple[Skill, ...]:
        seen: set[str] = set()
        unique: list[Skill] = []
        for skill in items:
            key = canonical_skill_name(skill.name)
            if key and key not in seen:
                seen.add(key)
                unique.append(skill)
        return tuple(unique)

    def add(self, skill: Skill) -> "SkillSet":
        if not canonical_skill_name(skill.name) or skill.name in self:
            return self
        return SkillSet(items=self.items + (skill,))

    def add_names(self, names: Iterable[str], category: str) -> "SkillSet":
        added = tuple(Skill(name=name, category=category) for name in names)
        if not added:
            return self
        return SkillSet(items=self.items + added)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = canonical_skill_name(name)
        return any(canonical_skill_name(skill.name) == key for skill in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def names(self, category: str | None = None) -> list[str]:
        return [skill.name for skill in self.items if category is None or skill.category == category]
