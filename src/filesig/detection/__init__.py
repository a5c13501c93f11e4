"""Magic-byte format detection and the classifiers built on it."""

from .catalog import HEADER_LENGTH, SIGNATURES
from .classifiers import (
    DOCUMENT_MIME_TYPES,
    RESUME_MIME_TYPES,
    has_text_bom,
    is_allowed,
    is_document,
    is_likely_plain_text,
    is_pdf,
    is_resume_format,
    is_rtf,
    is_zip_based,
    matches_extension,
)
from .detector import detect, detect_path, find_by_extension, supported_mime_types
from .errors import DetectionError, UnreadableFileError
from .models import Buffer, FileSignature
from .reader import HeaderReader

__all__ = [
    "HEADER_LENGTH",
    "SIGNATURES",
    "DOCUMENT_MIME_TYPES",
    "RESUME_MIME_TYPES",
    "Buffer",
    "FileSignature",
    "HeaderReader",
    "DetectionError",
    "UnreadableFileError",
    "detect",
    "detect_path",
    "find_by_extension",
    "supported_mime_types",
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
