from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from .utils import normalize_line

SUMMARY_HEADERS = (
    "professional summary",
    "summary",
    "profile",
    "objective",
    "about me",
    "résumé professionnel",
    "à propos",
    "profil",
    "objectif",
)
EXPERIENCE_HEADERS = (
    "work experience",
    "professional experience",
    "employment history",
    "experience",
    "expériences professionnelles",
    "expérience professionnelle",
    "expériences",
    "expérience",
)
EDUCATION_HEADERS = ("education", "academic background", "éducation", "formation", "diplômes")
SKILLS_HEADERS = (
    "technical skills",
    "skills",
    "competencies",
    "compétences techniques",
    "compétences",
)
PROJECTS_HEADERS = ("projects", "personal projects", "projets")
CERTIFICATIONS_HEADERS = ("certifications", "certificates", "licenses & certifications", "certificats")
LANGUAGES_HEADERS = ("languages", "langues")
VOLUNTEERING_HEADERS = (
    "volunteer experience",
    "volunteering",
    "volunteer",
    "bénévolat",
    "engagement associatif",
)

# Headers that close whichever section is currently open.
BOUNDARY_HEADERS: tuple[str, ...] = (
    EXPERIENCE_HEADERS
    + EDUCATION_HEADERS
    + SKILLS_HEADERS
    + PROJECTS_HEADERS
    + CERTIFICATIONS_HEADERS
    + LANGUAGES_HEADERS
    + VOLUNTEERING_HEADERS
)

ALL_HEADERS: frozenset[str] = frozenset(SUMMARY_HEADERS + BOUNDARY_HEADERS)

_MAX_LINE_PREFIX = 10


def _starts_line(text: str, index: int) -> bool:
    line_start = text.rfind("\n", 0, index) + 1
    prefix = text[line_start:index]
    return len(prefix) <= _MAX_LINE_PREFIX and not any(char.isalpha() for char in prefix)


def _ends_word(text: str, index: int) -> bool:
    return index >= len(text) or not text[index].isalpha()


def _header_matches(text: str, header: str, start: int = 0) -> Iterator[re.Match[str]]:
    pattern = re.compile(re.escape(header), re.IGNORECASE)
    for match in pattern.finditer(text, start):
        if _starts_line(text, match.start()) and _ends_word(text, match.end()):
            yield match


def find_header(text: str, headers: Sequence[str], start: int = 0) -> re.Match[str] | None:
    """First header occurrence that starts a line, trying headers in priority order."""
    for header in headers:
        match = next(_header_matches(text, header, start), None)
        if match is not None:
            return match
    return None


def _next_boundary(text: str, start: int) -> int:
    end = len(text)
    for header in BOUNDARY_HEADERS:
        match = next(_header_matches(text, header, start), None)
        if match is None:
            continue
        line_start = max(start, text.rfind("\n", 0, match.start()) + 1)
        end = min(end, line_start)
    return end


def find_section_span(text: str, headers: Sequence[str]) -> tuple[int, int] | None:
    if not text:
        return None
    opening = find_header(text, headers)
    if opening is None:
        return None
    start = opening.end()
    if start < len(text) and text[start] == ":":
        start += 1
    return start, _next_boundary(text, start)


def extract_section(text: str, headers: Sequence[str]) -> str:
    span = find_section_span(text or "", headers)
    if span is None:
        return ""
    start, end = span
    return text[start:end].strip()


def is_section_header_line(line: str) -> bool:
    return normalize_line(line).lower().rstrip(":").strip() in ALL_HEADERS
