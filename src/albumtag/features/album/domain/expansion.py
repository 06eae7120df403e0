"""
Summary: Expand an AlbumDescriptor into ordered per-track metadata records.
Why: Track and disc numbering are derived once, deterministically, from the album description.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from albumtag.shared.track_metadata import TrackMetadata

from .album import AlbumDescriptor

GENRE_SEPARATOR: Final[str] = "; "


def disc_number_for(tracks_per_disc: Sequence[int], index: int) -> int:
    """Return the 1-based disc holding the zero-based track ``index``.

    Discs are consumed in order until their cumulative track count exceeds
    ``index``. Empty discs never receive a track. When the counts run out
    first, the result is ``len(tracks_per_disc)``.
    """
    consumed = 0
    disc = 0
    while consumed <= index and disc < len(tracks_per_disc):
        consumed += tracks_per_disc[disc]
        disc += 1
    return disc


def join_genres(genre: Sequence[str]) -> str | None:
    """Collapse the album genre list into the single per-track value."""
    if not genre:
        return None
    return GENRE_SEPARATOR.join(genre)


def expand_tracks(album: AlbumDescriptor) -> list[TrackMetadata]:
    """Produce one TrackMetadata per album track, in album order.

    Args:
        album: Resolved album description.

    Returns:
        list[TrackMetadata]: Exactly ``len(album.tracks)`` records numbered from 1.
    """
    track_total = len(album.tracks)
    genre = join_genres(album.genre)

    records: list[TrackMetadata] = []
    for index, track_name in enumerate(album.tracks):
        disc_number = (
            disc_number_for(album.tracks_per_disc, index)
            if album.tracks_per_disc is not None
            else None
        )
        records.append(
            TrackMetadata(
                track_name=track_name,
                album_name=album.album_name,
                artist_name=album.artist_name,
                year=album.year,
                genre=genre,
                picture_path=album.picture_path,
                track_number=index + 1,
                track_total=track_total,
                disc_number=disc_number,
                disc_total=album.disc_total,
            )
        )
    return records


__all__ = ["GENRE_SEPARATOR", "disc_number_for", "expand_tracks", "join_genres"]
