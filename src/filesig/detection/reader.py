"""Bounded reads of a file's leading bytes."""

from __future__ import annotations

import os
from pathlib import Path

from .catalog import HEADER_LENGTH
from .errors import UnreadableFileError


class HeaderReader:
    """Read up to a fixed number of leading bytes from a file."""

    def read(self, path: str | os.PathLike[str], length: int = HEADER_LENGTH) -> bytes:
        """Return at most ``length`` bytes from the start of ``path``.

        Args:
            path: File to read.
            length: Maximum number of bytes to return.

        Returns:
            bytes: The leading bytes; shorter than ``length`` for small files.

        Raises:
            ValueError: If ``length`` is negative.
            UnreadableFileError: If the file is missing, inaccessible, a directory,
                the path itself is malformed (such as an embedded NUL), or the
                read fails.
        """
        if length < 0:
            raise ValueError("length must be zero or positive")

        # Paths are opened exactly as given; "~" is not expanded.
        target = Path(path)
        try:
            with target.open("rb") as fh:
                return fh.read(length)
        except OSError as exc:
            raise UnreadableFileError(target, exc.strerror or str(exc)) from exc
        except ValueError as exc:
            raise UnreadableFileError(target, str(exc)) from exc


__all__ = ["HeaderReader"]
