from __future__ import annotations

import re

from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.schemas import (
    Certification,
    Education,
    LanguageProficiency,
    Project,
    Volunteering,
    WorkExperience,
)

from .sections import (
    CERTIFICATIONS_HEADERS,
    EDUCATION_HEADERS,
    EXPERIENCE_HEADERS,
    LANGUAGES_HEADERS,
    PROJECTS_HEADERS,
    SKILLS_HEADERS,
    VOLUNTEERING_HEADERS,
    extract_section,
)
from .utils import is_bullet_like, is_url_like, normalize_line, split_lines, strip_bullet_prefix

_MONTHS = (
    "january|february|march|april|may|june|july|august|september|october|november|december"
    "|jan|feb|mar|apr|jun|jul|aug|sep|sept|oct|nov|dec"
    "|janvier|février|fevrier|mars|avril|mai|juin|juillet|août|aout|septembre|octobre|novembre|décembre|decembre"
    "|janv|févr|avr|juil|déc"
)
_YEAR = r"(?:19|20)\d{2}"
_DATE = rf"(?:\b(?:{_MONTHS})\.?\s+{_YEAR}|\d{{1,2}}/{_YEAR}|{_YEAR})"
_OPEN_END = r"(?:present|current|now|today|présent|actuel|aujourd'hui|en cours)"
DATE_RANGE_RE = re.compile(
    rf"(?P<start>{_DATE})\s*(?:-|–|—|to|à|au)\s*(?P<end>{_DATE}|{_OPEN_END})",
    re.IGNORECASE,
)
_ENTRY_SEPARATOR_RE = re.compile(r"\||\s[–—@-]\s")
_HEADER_SPLIT_RE = re.compile(r"\s*\|\s*|\s+[–—@-]\s+")
_DEGREE_RE = re.compile(
    r"\b(?:diploma|diplôme|licence|license|master|masters|bachelor|bachelors|b\.?sc|m\.?sc|b\.?a|b\.?s|m\.?s|mba|ph\.?d"
    r"|doctorate|doctorat|degree|associate|baccalauréat|bac|bts|dut|ingénieur|engineering degree)\b",
    re.IGNORECASE,
)
_FIELD_OF_STUDY_RE = re.compile(r"\s+(?:in|en|of science in)\s+", re.IGNORECASE)
_LANGUAGE_SPLIT_RE = re.compile(r"\s*[:|(]\s*|\s+[-–]\s+")
_SKILL_DELIMITERS_RE = re.compile(r"[,;•|\n·]")
_LABEL_PREFIX_RE = re.compile(r"^[^:\n]{1,30}:\s*", re.MULTILINE)
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

DEFAULT_FLUENCY = "Native/Fluent"
_MAX_HEADER_LINE = 150
_MAX_HEADER_WORDS = 12


def _cap(category: str, default: int) -> int:
    return int(get_scoring_value(f"extraction.max_entries.{category}", default))


def _section_lines(text: str, headers: tuple[str, ...]) -> list[str]:
    section = extract_section(text or "", headers)
    return [line for line in split_lines(section) if line.strip()]


def _clean(line: str) -> str:
    return strip_bullet_prefix(normalize_line(line))


# --- work experience ---------------------------------------------------------


def _is_entry_header(raw_line: str, line: str) -> bool:
    if is_bullet_like(raw_line):
        return False
    if len(line) >= _MAX_HEADER_LINE or len(line.split()) > _MAX_HEADER_WORDS:
        return False
    return bool(_ENTRY_SEPARATOR_RE.search(line))


def _header_parts(line: str) -> list[str]:
    return [part.strip(" ,") for part in _HEADER_SPLIT_RE.split(line) if part.strip(" ,")]


def _apply_header(draft: dict[str, str], parts: list[str]) -> None:
    for field, value in zip(("role", "company", "location"), parts):
        if not draft.get(field):
            draft[field] = value


def _has_header(draft: dict[str, str]) -> bool:
    return any(draft.get(field) for field in ("role", "company", "location"))


def extract_work_experience(text: str) -> list[WorkExperience]:
    limit = _cap("work_experience", 10)
    entries: list[WorkExperience] = []
    current: dict[str, str] | None = None
    pending: list[str] = []
    responsibilities: list[str] = []

    def flush() -> None:
        nonlocal current, responsibilities
        if current is not None and len(entries) < limit:
            entries.append(WorkExperience(**current, responsibilities="\n".join(responsibilities)))
        current = None
        responsibilities = []

    for raw_line in _section_lines(text, EXPERIENCE_HEADERS):
        line = normalize_line(raw_line)
        date_match = None if is_bullet_like(raw_line) else DATE_RANGE_RE.search(line)

        if date_match is not None:
            remainder = (line[: date_match.start()] + " " + line[date_match.end() :]).strip(" |,–—-()")
            if current is not None and not current.get("start_date") and not remainder and not responsibilities:
                current["start_date"] = date_match.group("start")
                current["end_date"] = date_match.group("end")
                continue
            flush()
            if len(entries) >= limit:
                break
            current = {"start_date": date_match.group("start"), "end_date": date_match.group("end")}
            _apply_header(current, _header_parts(normalize_line(remainder)) if remainder else pending[:3])
            pending = []
            continue

        if _is_entry_header(raw_line, line):
            # a bare date line opens an entry whose header follows it
            if current is not None and not _has_header(current) and not responsibilities:
                _apply_header(current, _header_parts(line))
                continue
            flush()
            if len(entries) >= limit:
                break
            current = {}
            _apply_header(current, _header_parts(line))
            continue

        cleaned = _clean(raw_line)
        if current is None:
            pending.append(cleaned)
        else:
            responsibilities.append(cleaned)

    flush()
    return entries[:limit]


# --- education ---------------------------------------------------------------


def extract_education(text: str) -> list[Education]:
    limit = _cap("education", 5)
    lines = [_clean(line) for line in _section_lines(text, EDUCATION_HEADERS)]
    entries: list[Education] = []
    previous_plain: str | None = None
    index = 0
    while index < len(lines) and len(entries) < limit:
        line = lines[index]
        if not _DEGREE_RE.search(line):
            previous_plain = line
            index += 1
            continue

        fields = {"degree": line}
        field_split = _FIELD_OF_STUDY_RE.split(line, maxsplit=1)
        if len(field_split) == 2:
            fields["field_of_study"] = DATE_RANGE_RE.sub("", field_split[1]).strip(" ,|–-")
        dates = DATE_RANGE_RE.search(line)
        if dates:
            fields["start_date"], fields["end_date"] = dates.group("start"), dates.group("end")

        following = lines[index + 1] if index + 1 < len(lines) else None
        if following is not None and not _DEGREE_RE.search(following):
            fields["school"] = following
            index += 1
        elif previous_plain is not None:
            fields["school"] = previous_plain
        previous_plain = None
        entries.append(Education(**fields))
        index += 1
    return entries


# --- light per-line sections -------------------------------------------------


def extract_volunteering(text: str) -> list[Volunteering]:
    limit = _cap("volunteering", 5)
    entries: list[Volunteering] = []
    for raw_line in _section_lines(text, VOLUNTEERING_HEADERS):
        line = _clean(raw_line)
        if len(line) <= 5:
            continue
        parts = _header_parts(line) if _ENTRY_SEPARATOR_RE.search(line) else []
        entries.append(
            Volunteering(
                role=parts[0] if len(parts) > 1 else "",
                organization=parts[1] if len(parts) > 1 else "",
                description=line,
            )
        )
        if len(entries) >= limit:
            break
    return entries


def _language_entry(line: str) -> LanguageProficiency | None:
    parts = _LANGUAGE_SPLIT_RE.split(line, maxsplit=1)
    language = parts[0].strip(" ,")
    if not language:
        return None
    fluency = parts[1].strip(" )") if len(parts) > 1 else ""
    return LanguageProficiency(language=language, fluency=fluency or DEFAULT_FLUENCY)


def extract_languages(text: str) -> list[LanguageProficiency]:
    limit = _cap("languages", 8)
    entries: list[LanguageProficiency] = []
    for raw_line in _section_lines(text, LANGUAGES_HEADERS):
        line = _clean(raw_line)
        if len(line) < 2 or len(line) > 80:
            continue
        if not _LANGUAGE_SPLIT_RE.search(line) and "," in line:
            candidates = [item.strip() for item in line.split(",")]
        else:
            candidates = [line]
        for candidate in candidates:
            entry = _language_entry(candidate) if candidate else None
            if entry is not None:
                entries.append(entry)
            if len(entries) >= limit:
                return entries
    return entries


def extract_certifications(text: str) -> list[Certification]:
    limit = _cap("certifications", 10)
    entries: list[Certification] = []
    for raw_line in _section_lines(text, CERTIFICATIONS_HEADERS):
        line = _clean(raw_line)
        if len(line) <= 5:
            continue
        year = _YEAR_RE.search(line)
        entries.append(Certification(name=line, date=year.group(0) if year else ""))
        if len(entries) >= limit:
            break
    return entries


def extract_projects(text: str) -> list[Project]:
    limit = _cap("projects", 5)
    entries: list[Project] = []
    for raw_line in _section_lines(text, PROJECTS_HEADERS):
        line = _clean(raw_line)
        if len(line) <= 15:
            continue
        title, description = _split_project(line)
        entries.append(Project(title=title, description=description))
        if len(entries) >= limit:
            break
    return entries


def _split_project(line: str) -> tuple[str, str]:
    parts = re.split(r"\s*(?::|\s[–—-]\s)\s*", line, maxsplit=1)
    if len(parts) == 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    return line, ""


# --- skills section ----------------------------------------------------------


def _is_plausible_skill(token: str) -> bool:
    if not 2 <= len(token) <= 40:
        return False
    if ":" in token or is_url_like(token) or "@" in token:
        return False
    return any(char.isalpha() for char in token)


def extract_section_skills(text: str) -> list[str]:
    """Free-form skill names listed under a skills heading."""
    limit = _cap("section_skills", 30)
    section = extract_section(text or "", SKILLS_HEADERS)
    if not section:
        return []
    section = "\n".join(strip_bullet_prefix(line) for line in split_lines(section))
    section = _LABEL_PREFIX_RE.sub("", section)
    skills: list[str] = []
    seen: set[str] = set()
    for token in _SKILL_DELIMITERS_RE.split(section):
        token = normalize_line(token).strip(" .")
        key = token.lower()
        if not _is_plausible_skill(token) or key in seen:
            continue
        seen.add(key)
        skills.append(token)
        if len(skills) >= limit:
            break
    return skills
