"""Boolean verdicts derived from detection.

Every check fails closed: content the catalog does not recognize is never
treated as an allowed or matching format (the plain-text heuristic is the one
deliberate fallback for unrecognized input).
"""

from __future__ import annotations

from typing import Collection

from .catalog import (
    DOCX_MIME,
    HTML_MIME,
    MSWORD_MIME,
    PDF_MIME,
    RTF_MIME,
    TEXT_MIME,
    WORDPERFECT_MIME,
    XML_MIME,
    ZIP_MIME,
)
from .detector import detect
from .models import Buffer

TEXT_SNIFF_LENGTH = 512
"""Maximum number of bytes inspected by :func:`is_likely_plain_text`."""

DOCUMENT_MIME_TYPES = frozenset(
    {
        PDF_MIME,
        MSWORD_MIME,
        RTF_MIME,
        WORDPERFECT_MIME,
        ZIP_MIME,
        TEXT_MIME,
    }
)

RESUME_MIME_TYPES = frozenset(
    {
        PDF_MIME,
        MSWORD_MIME,
        DOCX_MIME,
        ZIP_MIME,
        RTF_MIME,
        TEXT_MIME,
        HTML_MIME,
        XML_MIME,
    }
)

_TEXTLIKE_MIME_TYPES = frozenset({TEXT_MIME, HTML_MIME, XML_MIME})
_TEXT_CONTROL_BYTES = frozenset({0x09, 0x0A, 0x0D})


def _detected_mime(data: Buffer) -> str | None:
    signature = detect(data)
    return signature.mime_type if signature is not None else None


def is_allowed(data: Buffer, allowed_mime_types: Collection[str]) -> bool:
    """Return True when the detected MIME type is in ``allowed_mime_types``."""
    mime = _detected_mime(data)
    return mime is not None and mime in allowed_mime_types


def is_pdf(data: Buffer) -> bool:
    """Return True for PDF content."""
    return _detected_mime(data) == PDF_MIME


def is_zip_based(data: Buffer) -> bool:
    """Return True for ZIP archives, including DOCX, XLSX and other ZIP-based formats."""
    return _detected_mime(data) == ZIP_MIME


def is_rtf(data: Buffer) -> bool:
    """Return True for Rich Text Format content."""
    return _detected_mime(data) == RTF_MIME


def is_document(data: Buffer) -> bool:
    """Return True for document-like formats (see ``DOCUMENT_MIME_TYPES``)."""
    return _detected_mime(data) in DOCUMENT_MIME_TYPES


def has_text_bom(data: Buffer) -> bool:
    """Return True when ``data`` starts with a text byte-order mark."""
    signature = detect(data)
    return signature is not None and signature.mime_type == TEXT_MIME and signature.is_bom


def _is_text_byte(value: int) -> bool:
    return 32 <= value <= 126 or value in _TEXT_CONTROL_BYTES or value >= 128


def is_likely_plain_text(data: Buffer) -> bool:
    """Guess whether ``data`` is human-readable text.

    Recognized content counts as text only for plain text, HTML and XML.
    Unrecognized content is scanned up to ``TEXT_SNIFF_LENGTH`` bytes: printable
    ASCII, tab, newline, carriage return and bytes with the high bit set pass;
    NUL and other control codes fail.

    Args:
        data: Leading bytes of the content.

    Returns:
        bool: True if the content looks like text.
    """
    if len(data) == 0:
        return False

    signature = detect(data)
    if signature is not None:
        return signature.mime_type in _TEXTLIKE_MIME_TYPES

    return all(_is_text_byte(value) for value in bytes(data[:TEXT_SNIFF_LENGTH]))


def is_resume_format(data: Buffer) -> bool:
    """Return True for formats acceptable as a resume upload.

    Recognized content must map to ``RESUME_MIME_TYPES``. Unrecognized content
    is accepted only when it looks like plain text, which covers text resumes
    saved without a byte-order mark.
    """
    signature = detect(data)
    if signature is not None:
        return signature.mime_type in RESUME_MIME_TYPES
    return is_likely_plain_text(data)


def matches_extension(data: Buffer, extension: str) -> bool:
    """Return True when the detected format answers for the claimed ``extension``.

    Used to catch uploads whose name claims one format while the bytes say
    another. Unrecognized content never matches.
    """
    signature = detect(data)
    return signature is not None and signature.claims(extension)


__all__ = [
    "DOCUMENT_MIME_TYPES",
    "RESUME_MIME_TYPES",
    "TEXT_SNIFF_LENGTH",
    "is_allowed",
    "is_pdf",
    "is_zip_based",
    "is_rtf",
    "is_document",
    "has_text_bom",
    "is_likely_plain_text",
    "is_resume_format",
    "matches_extension",
]
