"""Signature records describing a file format's leading bytes."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator

Buffer = bytes | bytearray | memoryview
"""Bytes-like input accepted by detection and the classifiers."""


class FileSignature(BaseModel):
    """A magic-byte pattern paired with the format it identifies.

    Attributes:
        name: Human-readable label; several entries may share one.
        pattern: Bytes that must appear at offset 0 of a matching buffer.
        extension: Primary extension without the leading dot.
        mime_type: MIME type reported for the format.
        extensions: Every extension known to share this signature.
        is_bom: Whether the entry is a text byte-order mark rather than a format.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    pattern: bytes
    extension: str
    mime_type: str
    extensions: Tuple[str, ...] = ()
    is_bom: bool = False

    @field_validator("name", "extension", "mime_type")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("pattern")
    @classmethod
    def _require_pattern(cls, value: bytes) -> bytes:
        if not value:
            raise ValueError("pattern must contain at least one byte")
        return value

    @field_validator("extension")
    @classmethod
    def _reject_leading_dot(cls, value: str) -> str:
        if value.startswith("."):
            raise ValueError("extension must not start with a dot")
        return value

    def matches(self, data: Buffer) -> bool:
        """Return True when the whole pattern is a prefix of ``data``.

        A buffer holding only part of the pattern does not match.
        """
        size = len(self.pattern)
        if len(data) < size:
            return False
        return bytes(data[:size]) == self.pattern

    def claims(self, extension: str) -> bool:
        """Return True if ``extension`` is one this signature answers for."""
        token = extension.strip().lstrip(".").lower()
        if not token:
            return False
        return token == self.extension or token in self.extensions


__all__ = ["FileSignature"]
