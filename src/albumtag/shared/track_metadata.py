# Where: albumtag.shared.track_metadata
# What: Canonical per-track metadata record shared by expansion, tagging and renaming.
# Why: One immutable shape flows from the album resolver to every file operation.

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class TrackMetadata:
    """Metadata for a single output track."""

    track_name: str
    album_name: str | None = None
    artist_name: str | None = None
    year: int | None = None
    genre: str | None = None
    picture_path: Path | None = None
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None


__all__ = ["TrackMetadata"]
