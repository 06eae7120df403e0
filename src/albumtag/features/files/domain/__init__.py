"""File naming domain rules."""

from .sanitizer import (
    DISALLOWED_CHARACTERS,
    TRACK_NUMBER_WIDTH,
    UNKNOWN_EXTENSION,
    build_track_filename,
    file_extension,
    normalize,
)

__all__ = [
    "DISALLOWED_CHARACTERS",
    "TRACK_NUMBER_WIDTH",
    "UNKNOWN_EXTENSION",
    "build_track_filename",
    "file_extension",
    "normalize",
]
