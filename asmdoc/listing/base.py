"""
Shared helpers for reading listing and label files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

FALLBACK_ENCODINGS = ["cp1252"]
LAST_RESORT_ENCODING = "latin-1"


class ListingError(Exception):
    """Raised when a listing or labels file cannot be read."""

    def __init__(self, message: str, source_path: Path | None = None, details: str | None = None):
        self.source_path = source_path
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "source_path": str(self.source_path) if self.source_path else None,
            "details": self.details,
        }


def read_text_file(path: Path) -> str:
    """
    Read a text file, falling back to 8-bit encodings.

    Assembler sources are frequently written in a legacy code page, so
    UTF-8 is tried first, then FALLBACK_ENCODINGS, then latin-1. latin-1
    maps every byte to a character, so decoding never fails; bytes the
    other encodings reject come out as their latin-1 characters.

    Raises:
        ListingError: If the file is missing or cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise ListingError(f"File not found: {path}", source_path=path)

    try:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        for encoding in FALLBACK_ENCODINGS:
            try:
                content = path.read_text(encoding=encoding)
                logger.warning("Used fallback encoding %s for %s", encoding, path)
                return content
            except UnicodeDecodeError:
                continue

        # Last resort, cannot raise UnicodeDecodeError
        logger.warning("Used fallback encoding %s for %s", LAST_RESORT_ENCODING, path)
        return path.read_text(encoding=LAST_RESORT_ENCODING)
    except OSError as e:
        raise ListingError(
            f"Failed to read file: {e}",
            source_path=path,
            details=str(e),
        ) from e
