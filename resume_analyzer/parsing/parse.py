from __future__ import annotations

import logging
from io import BytesIO
from pathlib import PurePath

from resume_analyzer.core.errors import UnsupportedDocumentError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".md", ".pdf", ".docx")


def _decode_text(content: bytes) -> str:
    for encoding in ("utf-8", "utf-16", "latin-1"):
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    return ""


def _parse_pdf(content: bytes, filename: str) -> str:
    from pypdf import PdfReader

    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
    except Exception as exc:
        logger.warning("pdf_parse_failed filename=%s error=%s", filename, exc)
        return ""

    if not text_parts:
        logger.warning("pdf_without_text filename=%s", filename)
    return "\n".join(text_parts)


def _parse_docx(content: bytes, filename: str) -> str:
    from docx import Document

    try:
        document = Document(BytesIO(content))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    except Exception as exc:
        logger.warning("docx_parse_failed filename=%s error=%s", filename, exc)
        return ""

    if not paragraphs:
        logger.warning("docx_without_text filename=%s", filename)
    return "\n".join(paragraphs)


def extract_text(content: bytes, filename: str) -> str:
    """Decode an uploaded resume to plain text.

    Unknown extensions raise ``UnsupportedDocumentError``; a document that
    cannot be parsed yields an empty string.
    """
    extension = PurePath(filename or "").suffix.lower()
    if extension in {".txt", ".md"}:
        return _decode_text(content)
    if extension == ".pdf":
        return _parse_pdf(content, filename)
    if extension == ".docx":
        return _parse_docx(content, filename)
    raise UnsupportedDocumentError(extension, SUPPORTED_EXTENSIONS)
