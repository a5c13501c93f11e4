"""Magic-byte detection over the signature catalog."""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

from .catalog import HEADER_LENGTH, SIGNATURES
from .errors import UnreadableFileError
from .models import Buffer, FileSignature
from .reader import HeaderReader

LOGGER = logging.getLogger(__name__)


def detect(data: Buffer) -> Optional[FileSignature]:
    """Return the first catalog entry whose pattern prefixes ``data``.

    Entries are tried in catalog order and the earliest full match wins. Any
    buffer is valid input, including an empty one; buffers shorter than a
    pattern simply cannot match it.

    Args:
        data: Leading bytes of the content, ideally at least ``HEADER_LENGTH``.

    Returns:
        Optional[FileSignature]: The matching catalog entry, or None if unknown.
    """
    for signature in SIGNATURES:
        if signature.matches(data):
            return signature
    return None


def detect_path(
    path: str | os.PathLike[str],
    *,
    reader: HeaderReader | None = None,
    length: int = HEADER_LENGTH,
) -> Optional[FileSignature]:
    """Detect the format of the file at ``path``.

    Unreadable files (missing, permission denied, directories, malformed
    paths) yield None rather than an exception. The path is used as given;
    a leading "~" is not expanded.

    Args:
        path: File to inspect.
        reader: Collaborator used to fetch leading bytes.
        length: Number of leading bytes to read.

    Returns:
        Optional[FileSignature]: The matching catalog entry, or None.
    """
    reader = reader or HeaderReader()
    try:
        header = reader.read(path, length)
    except UnreadableFileError as exc:
        LOGGER.debug("Treating %s as unknown: %s", exc.path, exc.reason)
        return None
    return detect(header)


def find_by_extension(extension: str) -> Tuple[FileSignature, ...]:
    """Return catalog entries that answer for ``extension``, in catalog order."""
    return tuple(signature for signature in SIGNATURES if signature.claims(extension))


def supported_mime_types() -> frozenset[str]:
    """Return every MIME type the catalog can report."""
    return frozenset(signature.mime_type for signature in SIGNATURES)


__all__ = ["detect", "detect_path", "find_by_extension", "supported_mime_types"]
