from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_DIGIT_RUN_RE = re.compile(r"\d[\d\s().-]{5,}\d")
_YEAR_SPAN_RE = re.compile(r"(?:19|20)\d{2}\s*[-–]\s*(?:19|20)\d{2}")
_URL_RE = re.compile(r"(?:https?://|www\.|linkedin\.com|github\.com)", re.IGNORECASE)


def split_lines(text: str) -> list[str]:
    return (text or "").splitlines()


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def non_empty_lines(text: str) -> list[str]:
    return [normalized for normalized in (normalize_line(line) for line in split_lines(text)) if normalized]


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def contains_email(line: str) -> bool:
    return bool(EMAIL_RE.search(line))


def has_long_digit_run(line: str) -> bool:
    digits = _DIGIT_RUN_RE.search(_YEAR_SPAN_RE.sub(" ", line))
    return bool(digits and sum(char.isdigit() for char in digits.group(0)) >= 6)


def is_url_like(value: str) -> bool:
    return bool(_URL_RE.search(value)) or bool(re.search(r"\.(?:com|org|net|io|dev)\b", value, re.IGNORECASE))
