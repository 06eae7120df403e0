"""Tests for audio file discovery inside an album directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from albumtag.features.files import AUDIO_EXTENSIONS, list_audio_files


def test_lists_supported_files_sorted_by_name(tmp_path: Path) -> None:
    for name in ("b.flac", "a.mp3", "C.OGG", "d.asf", "notes.txt", "cover.jpg"):
        (tmp_path / name).touch()
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "hidden.mp3").touch()
    (tmp_path / "folder.mp3").mkdir()

    files = list_audio_files(tmp_path)

    assert [path.name for path in files] == ["C.OGG", "a.mp3", "b.flac", "d.asf"]


def test_empty_directory_returns_empty_list(tmp_path: Path) -> None:
    assert list_audio_files(tmp_path) == []


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = list_audio_files(tmp_path / "absent")


def test_file_instead_of_directory_raises(tmp_path: Path) -> None:
    path = tmp_path / "a.mp3"
    path.touch()
    with pytest.raises(NotADirectoryError):
        _ = list_audio_files(path)


def test_supported_extensions() -> None:
    assert AUDIO_EXTENSIONS == frozenset({"mp3", "ogg", "flac", "asf"})
