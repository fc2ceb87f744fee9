"""Best-effort extraction of personal profile fields from raw resume text.

Each field is resolved by an ordered tuple of independent strategies. A
strategy takes the raw text and returns a value or ``None``; the first
non-empty result wins and every field falls back to an empty string.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from resume_analyzer.schemas import ContactFields

from .sections import SUMMARY_HEADERS, extract_section, is_section_header_line
from .utils import (
    EMAIL_RE,
    contains_email,
    has_long_digit_run,
    normalize_line,
    non_empty_lines,
)

Strategy = Callable[[str], str | None]

NAME_PLACEHOLDER = "Candidate"

_PHONE_CANDIDATE_RE = re.compile(r"\+?\(?\d[\d \t().-]{7,}\d")
_LOOSE_PHONE_RE = re.compile(r"\+?\d[\d \t.-]{6,14}\d")
_YEAR_RANGE_RE = re.compile(r"^\d{4}\s*[-–]\s*\d{4}$")
_LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/([A-Za-z0-9_%-]+)/?", re.IGNORECASE
)
_GITHUB_RE = re.compile(r"(?:https?://)?(?:www\.)?github\.com/([A-Za-z0-9_-]+)", re.IGNORECASE)
_LOCATION_LABEL_RE = re.compile(
    r"^\s*(?:location|address|city|based in|adresse|ville|localisation|lieu)\s*[:\-]\s*(.+)$",
    re.IGNORECASE,
)
_CITY_REGION_RE = re.compile(
    r"\b([A-Z][a-zà-ÿ]+(?:[ -][A-Z][a-zà-ÿ]+)*),\s*([A-Z][a-zà-ÿ]+(?: [A-Z][a-zà-ÿ]+)*|[A-Z]{2})\b"
)
_SEGMENT_SPLIT_RE = re.compile(r"\s*[|•–]\s*|\s+-\s+")
_ROLE_KEYWORDS = (
    "developer",
    "engineer",
    "architect",
    "analyst",
    "manager",
    "consultant",
    "designer",
    "scientist",
    "administrator",
    "specialist",
    "technician",
    "lead",
    "intern",
    "développeur",
    "développeuse",
    "ingénieur",
    "ingénieure",
    "chef de projet",
    "stagiaire",
    "technicien",
)
_ROLE_RE = re.compile(r"\b(?:" + "|".join(re.escape(word) for word in _ROLE_KEYWORDS) + r")s?\b", re.IGNORECASE)

_NAME_SCAN_LINES = 5
_TITLE_SCAN_LINES = 15
_CITY_SCAN_LINES = 25


def first_match(strategies: Sequence[Strategy], text: str) -> str:
    for strategy in strategies:
        value = strategy(text)
        if value:
            return value.strip()
    return ""


def _header_block(text: str, limit: int) -> list[str]:
    """Leading non-empty lines, stopping at the first section header."""
    block: list[str] = []
    for line in non_empty_lines(text)[:limit]:
        if is_section_header_line(line):
            break
        block.append(line)
    return block


# --- email / phone -----------------------------------------------------------


def _email_pattern(text: str) -> str | None:
    match = EMAIL_RE.search(text)
    return match.group(0) if match else None


def _international_phone(text: str) -> str | None:
    for match in _PHONE_CANDIDATE_RE.finditer(text):
        digits = sum(char.isdigit() for char in match.group(0))
        if 10 <= digits <= 15:
            return match.group(0)
    return None


def _loose_phone(text: str) -> str | None:
    for match in _LOOSE_PHONE_RE.finditer(text):
        candidate = match.group(0).strip()
        digits = sum(char.isdigit() for char in candidate)
        if 8 <= digits <= 12 and not _YEAR_RANGE_RE.match(candidate) and not candidate.isdigit():
            return candidate
    return None


# --- links -------------------------------------------------------------------


def _linkedin_profile(text: str) -> str | None:
    match = _LINKEDIN_RE.search(text)
    return f"https://www.linkedin.com/in/{match.group(1)}" if match else None


def _github_profile(text: str) -> str | None:
    match = _GITHUB_RE.search(text)
    return f"https://github.com/{match.group(1)}" if match else None


# --- city --------------------------------------------------------------------


def _labelled_location(text: str) -> str | None:
    for line in non_empty_lines(text)[:_CITY_SCAN_LINES]:
        match = _LOCATION_LABEL_RE.match(line)
        if match:
            return match.group(1)
    return None


def _city_region_pair(text: str) -> str | None:
    for line in _header_block(text, _CITY_SCAN_LINES):
        if contains_email(line):
            continue
        match = _CITY_REGION_RE.search(line)
        if match:
            return match.group(0)
    return None


def _is_city_segment(segment: str) -> bool:
    if not 2 <= len(segment) <= 30:
        return False
    if contains_email(segment) or has_long_digit_run(segment) or _ROLE_RE.search(segment):
        return False
    return all(char.isalpha() or char in " '-" for char in segment)


def _separated_segment(text: str) -> str | None:
    block = _header_block(text, _CITY_SCAN_LINES)
    for line in block[1:]:
        if not re.search(r"[|•–-]", line):
            continue
        for segment in _SEGMENT_SPLIT_RE.split(line):
            segment = segment.strip()
            if _is_city_segment(segment):
                return segment
    return None


# --- name / title ------------------------------------------------------------


def _looks_like_name(line: str) -> bool:
    return len(line) > 2 and not contains_email(line) and not has_long_digit_run(line)


def _leading_name_line(text: str) -> str | None:
    for line in non_empty_lines(text)[:_NAME_SCAN_LINES]:
        if _looks_like_name(line):
            return line
    return None


def _first_line(text: str) -> str | None:
    lines = non_empty_lines(text)
    return lines[0] if lines else None


def _role_line(text: str, name: str) -> str | None:
    for line in non_empty_lines(text)[:_TITLE_SCAN_LINES]:
        if line == name or contains_email(line) or has_long_digit_run(line):
            continue
        if is_section_header_line(line):
            continue
        if not _ROLE_RE.search(line):
            continue
        for segment in _SEGMENT_SPLIT_RE.split(line):
            if _ROLE_RE.search(segment):
                return segment.strip()
        return line
    return None


EMAIL_STRATEGIES: tuple[Strategy, ...] = (_email_pattern,)
PHONE_STRATEGIES: tuple[Strategy, ...] = (_international_phone, _loose_phone)
LINKEDIN_STRATEGIES: tuple[Strategy, ...] = (_linkedin_profile,)
WEBSITE_STRATEGIES: tuple[Strategy, ...] = (_github_profile,)
CITY_STRATEGIES: tuple[Strategy, ...] = (_labelled_location, _city_region_pair, _separated_segment)
NAME_STRATEGIES: tuple[Strategy, ...] = (_leading_name_line, _first_line)


def extract_email(text: str) -> str:
    return first_match(EMAIL_STRATEGIES, text or "")


def extract_phone(text: str) -> str:
    return first_match(PHONE_STRATEGIES, text or "")


def extract_linkedin(text: str) -> str:
    return first_match(LINKEDIN_STRATEGIES, text or "")


def extract_website(text: str) -> str:
    return first_match(WEBSITE_STRATEGIES, text or "")


def extract_city(text: str) -> str:
    return first_match(CITY_STRATEGIES, text or "")


def extract_name(text: str) -> str:
    if not (text or "").strip():
        return NAME_PLACEHOLDER
    return first_match(NAME_STRATEGIES, text)


def extract_job_title(text: str, name: str = "") -> str:
    return first_match((lambda raw: _role_line(raw, normalize_line(name)),), text or "")


def extract_summary(text: str) -> str:
    return extract_section(text or "", SUMMARY_HEADERS)


def extract_profile(text: str, supplied: ContactFields | None = None) -> ContactFields:
    """Resolve contact fields, keeping non-empty caller-supplied name/email/phone."""
    supplied = supplied or ContactFields()
    raw = text or ""
    name = supplied.name.strip() or extract_name(raw)
    return ContactFields(
        name=name,
        email=supplied.email.strip() or extract_email(raw),
        phone=supplied.phone.strip() or extract_phone(raw),
        city=extract_city(raw),
        job_title=extract_job_title(raw, name),
        linkedin=extract_linkedin(raw),
        website=extract_website(raw),
        summary=extract_summary(raw),
    )


__all__ = [
    "NAME_PLACEHOLDER",
    "first_match",
    "extract_email",
    "extract_phone",
    "extract_linkedin",
    "extract_website",
    "extract_city",
    "extract_name",
    "extract_job_title",
    "extract_summary",
    "extract_profile",
]
