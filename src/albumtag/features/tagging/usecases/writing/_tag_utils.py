"""Tag utility helpers.

Where: src/albumtag/features/tagging/usecases/writing/_tag_utils.py
What: Pure helpers for formatting number pairs and loading cover art.
Why: Share value formatting between the per-format writers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = [
    "DEFAULT_PICTURE_MIME",
    "format_number_pair",
    "guess_picture_mime",
    "read_picture",
]

DEFAULT_PICTURE_MIME: Final[str] = "image/jpeg"

_PICTURE_MIME_TYPES: Final[dict[str, str]] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
}


def format_number_pair(number: int | None, total: int | None) -> str | None:
    """Format a track or disc position as ``"n/total"`` or ``"n"``.

    Returns None when ``number`` is unknown; a total alone is never written.
    """
    if number is None:
        return None
    if total is None:
        return str(number)
    return f"{number}/{total}"


def guess_picture_mime(path: Path) -> str:
    """Return the MIME type for a cover image based on its extension."""
    return _PICTURE_MIME_TYPES.get(path.suffix.lower(), DEFAULT_PICTURE_MIME)


def read_picture(path: Path) -> tuple[bytes, str]:
    """Read cover art bytes and their MIME type.

    Raises:
        OSError: If the picture cannot be read.
    """
    return path.read_bytes(), guess_picture_mime(path)
