"""
Summary: Tests for resolving album documents into AlbumDescriptor values.
Why: Only tracks are mandatory; every other field must degrade to absent.
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path

import pytest

from albumtag.features.album import (
    AlbumDescriptor,
    ConfigTypeError,
    MissingKeyError,
    resolve_album,
)


def test_resolves_full_document(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    doc = {
        "album": "Night Drive",
        "artist": "The Signals",
        "year": 2019,
        "genre": ["Synthwave", "Electronic"],
        "picture": "cover.jpg",
        "disc_total": 2,
        "tracks_per_disc": [2, 1],
        "tracks": ["Intro", "Highway", "Outro"],
    }

    album = resolve_album(doc)

    assert album == AlbumDescriptor(
        tracks=("Intro", "Highway", "Outro"),
        album_name="Night Drive",
        artist_name="The Signals",
        year=2019,
        genre=("Synthwave", "Electronic"),
        picture_path=Path.cwd() / "cover.jpg",
        disc_total=2,
        tracks_per_disc=(2, 1),
    )


def test_tracks_only_document_leaves_everything_else_absent() -> None:
    album = resolve_album({"tracks": ["Only"]})

    assert album.tracks == ("Only",)
    assert album.album_name is None
    assert album.artist_name is None
    assert album.year is None
    assert album.genre == ()
    assert album.picture_path is None
    assert album.disc_total is None
    assert album.tracks_per_disc is None


def test_missing_tracks_raises_missing_key() -> None:
    with pytest.raises(MissingKeyError) as excinfo:
        _ = resolve_album({"album": "No Tracks"})
    assert str(excinfo.value) == "Missing key: tracks"


@pytest.mark.parametrize("tracks", ["single title", ["a", 2], 7])
def test_wrong_shaped_tracks_raise_missing_key(tracks: object) -> None:
    with pytest.raises(MissingKeyError):
        _ = resolve_album({"tracks": tracks})


def test_empty_tracks_raise_type_error() -> None:
    with pytest.raises(ConfigTypeError):
        _ = resolve_album({"tracks": []})


def test_alternate_key_names_are_accepted() -> None:
    album = resolve_album(
        {
            "album_name": "Alt",
            "album_artist": "Someone",
            "date": "2001-09-11",
            "genres": "Ambient",
            "total_discs": "3",
            "tracks": ["x"],
        }
    )

    assert album.album_name == "Alt"
    assert album.artist_name == "Someone"
    assert album.year == 2001
    assert album.genre == ("Ambient",)
    assert album.disc_total == 3


def test_primary_key_wins_over_alternates() -> None:
    album = resolve_album(
        {"artist": "Primary", "artist_name": "Secondary", "tracks": ["x"]}
    )
    assert album.artist_name == "Primary"


def test_wrong_typed_optional_fields_become_absent() -> None:
    album = resolve_album(
        {
            "album": 12,
            "artist": ["a"],
            "year": "unknown",
            "genre": 3,
            "picture": 5,
            "disc_total": "two",
            "tracks_per_disc": "3",
            "tracks": ["x"],
        }
    )

    assert album.album_name is None
    assert album.artist_name is None
    assert album.year is None
    assert album.genre == ()
    assert album.picture_path is None
    assert album.disc_total is None
    assert album.tracks_per_disc is None


def test_year_accepts_toml_dates() -> None:
    album = resolve_album({"date": datetime.date(1999, 1, 2), "tracks": ["x"]})
    assert album.year == 1999


def test_year_falls_back_to_date_when_year_is_unparsable() -> None:
    album = resolve_album({"year": "soon", "date": "2024-01-01", "tracks": ["x"]})
    assert album.year == 2024


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2020", 2020),
        (" 2020 ", 2020),
        ("2020-05-01", 2020),
        ("2020-05", 2020),
        ("12345", 12345),
        ("2020abc", None),
        ("20a0", None),
        ("2020-05-01T10:00", None),
    ],
)
def test_year_string_must_match_whole_value(raw: str, expected: int | None) -> None:
    album = resolve_album({"year": raw, "tracks": ["x"]})
    assert album.year == expected


def test_year_with_trailing_text_falls_back_to_date() -> None:
    album = resolve_album({"year": "2020abc", "date": "2019", "tracks": ["x"]})
    assert album.year == 2019


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3", 3), (" 3 ", 3), ("3x", None), ("-1", None), ("", None)],
)
def test_disc_total_digit_strings(raw: str, expected: int | None) -> None:
    album = resolve_album({"disc_total": raw, "tracks": ["x"]})
    assert album.disc_total == expected


def test_boolean_disc_total_is_ignored() -> None:
    album = resolve_album({"disc_total": True, "tracks": ["x"]})
    assert album.disc_total is None


def test_single_tracks_per_disc_is_wrapped() -> None:
    album = resolve_album({"tracks_per_disc": 4, "tracks": ["x"]})
    assert album.tracks_per_disc == (4,)


def test_negative_tracks_per_disc_is_dropped_with_warning(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="albumtag"):
        album = resolve_album({"tracks_per_disc": [3, -1], "tracks": ["x"]})

    assert album.tracks_per_disc is None
    assert "negative" in caplog.text


def test_empty_picture_string_is_absent() -> None:
    album = resolve_album({"picture": "  ", "tracks": ["x"]})
    assert album.picture_path is None


def test_picture_falls_back_to_cover_key(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    album = resolve_album({"cover": "art/front.png", "tracks": ["x"]})
    assert album.picture_path == Path.cwd() / "art/front.png"


def test_picture_is_absent_when_working_directory_is_unavailable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _raise() -> Path:
        raise FileNotFoundError("cwd removed")

    monkeypatch.setattr(Path, "cwd", staticmethod(_raise))
    album = resolve_album({"picture": "cover.jpg", "tracks": ["x"]})
    assert album.picture_path is None
