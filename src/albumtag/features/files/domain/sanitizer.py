"""
Summary: Strip filesystem-hostile characters and build canonical track file names.
Why: Renamed files must stay consistent with the titles written into their tags.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Final

# Quotes, path separators, angle brackets, colon, pipe, asterisk, question mark.
DISALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset("'\"/\\<>:|*?")

UNKNOWN_EXTENSION: Final[str] = ".unknown"
TRACK_NUMBER_WIDTH: Final[int] = 2

_DELETE_DISALLOWED: Final[dict[int, None]] = dict.fromkeys(map(ord, DISALLOWED_CHARACTERS))


def normalize(raw_title: str) -> str:
    """Remove every disallowed character, leaving everything else untouched.

    Spaces, dots and non-ASCII characters are preserved; nothing is collapsed
    or trimmed.

    Args:
        raw_title: Title or file name to clean.

    Returns:
        str: ``raw_title`` without any character from ``DISALLOWED_CHARACTERS``.
    """
    return raw_title.translate(_DELETE_DISALLOWED)


def file_extension(path: PurePath | str, default: str = UNKNOWN_EXTENSION) -> str:
    """Return the extension of ``path`` with its leading dot, or ``default``."""
    suffix = PurePath(path).suffix
    return suffix if suffix else default


def build_track_filename(
    track_number: int,
    title: str,
    extension: str = UNKNOWN_EXTENSION,
) -> str:
    """Build ``"<NN> - <title><extension>"`` with the number padded to two digits.

    Args:
        track_number: 1-based track number; wider numbers are not truncated.
        title: Track title, normalized here.
        extension: Extension including its leading dot.

    Returns:
        str: The new file name, without any directory component.
    """
    return f"{track_number:0{TRACK_NUMBER_WIDTH}d} - {normalize(title)}{extension}"


__all__ = [
    "DISALLOWED_CHARACTERS",
    "TRACK_NUMBER_WIDTH",
    "UNKNOWN_EXTENSION",
    "build_track_filename",
    "file_extension",
    "normalize",
]
