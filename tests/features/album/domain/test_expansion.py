"""Tests for expanding an album into per-track metadata."""

from __future__ import annotations

from pathlib import Path

import pytest

from albumtag.features.album import AlbumDescriptor, disc_number_for, expand_tracks
from albumtag.features.album.domain.expansion import join_genres


@pytest.mark.parametrize(
    ("tracks_per_disc", "expected"),
    [
        ([3, 4, 2], [1, 1, 1, 2, 2, 2, 2, 3, 3]),
        ([0, 2], [2, 2]),
        ([2, 0, 1], [1, 1, 3]),
        ([1], [1, 1, 1]),
    ],
)
def test_disc_number_for(tracks_per_disc: list[int], expected: list[int]) -> None:
    assert [disc_number_for(tracks_per_disc, index) for index in range(len(expected))] == expected


def test_join_genres() -> None:
    assert join_genres(()) is None
    assert join_genres(("Rock",)) == "Rock"
    assert join_genres(("Rock", "Pop")) == "Rock; Pop"


def test_expand_tracks_numbers_every_track() -> None:
    album = AlbumDescriptor(
        tracks=tuple(f"Track {n}" for n in range(1, 10)),
        album_name="Box",
        artist_name="Band",
        year=2010,
        genre=("Rock", "Blues"),
        picture_path=Path("/covers/box.jpg"),
        disc_total=3,
        tracks_per_disc=(3, 4, 2),
    )

    records = expand_tracks(album)

    assert len(records) == 9
    assert [r.track_number for r in records] == list(range(1, 10))
    assert {r.track_total for r in records} == {9}
    assert [r.disc_number for r in records] == [1, 1, 1, 2, 2, 2, 2, 3, 3]
    assert [r.track_name for r in records] == list(album.tracks)

    first = records[0]
    assert first.album_name == "Box"
    assert first.artist_name == "Band"
    assert first.year == 2010
    assert first.genre == "Rock; Blues"
    assert first.picture_path == Path("/covers/box.jpg")
    assert first.disc_total == 3


def test_expand_tracks_without_disc_information() -> None:
    records = expand_tracks(AlbumDescriptor(tracks=("a", "b")))

    assert [r.disc_number for r in records] == [None, None]
    assert all(r.disc_total is None for r in records)
    assert all(r.genre is None for r in records)


def test_expand_tracks_with_empty_disc_counts_gives_disc_zero() -> None:
    records = expand_tracks(AlbumDescriptor(tracks=("a", "b"), tracks_per_disc=()))
    assert [record.disc_number for record in records] == [0, 0]


def test_expanded_records_reproduce_album_fields() -> None:
    """Every record carries the album-level fields unchanged."""

    album = AlbumDescriptor(tracks=("one", "two", "three"), album_name="A", artist_name="B", year=1)
    records = expand_tracks(album)

    assert tuple(r.track_name for r in records) == album.tracks
    assert {(r.album_name, r.artist_name, r.year) for r in records} == {("A", "B", 1)}
