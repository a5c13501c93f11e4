"""Detection errors."""

from __future__ import annotations

from pathlib import Path


class DetectionError(Exception):
    """Base exception for detection failures outside the in-memory core."""


class UnreadableFileError(DetectionError):
    """Raised when the leading bytes of a file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path
        self.reason = reason
