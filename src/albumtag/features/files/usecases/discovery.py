"""
Summary: List the audio files of an album directory in lexicographic order.
Why: Tracks are paired with files positionally, so the ordering must be deterministic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from albumtag.platform.logging import logger

AUDIO_EXTENSIONS: Final[frozenset[str]] = frozenset({"mp3", "ogg", "flac", "asf"})


def is_audio_file(path: Path) -> bool:
    """Return True when ``path`` is a regular file with a supported extension."""
    extension = path.suffix.lower().lstrip(".")
    return extension in AUDIO_EXTENSIONS and path.is_file()


def list_audio_files(directory: Path | str) -> list[Path]:
    """Return the supported audio files directly inside ``directory``.

    Args:
        directory: Album directory; subdirectories are not searched.

    Returns:
        list[Path]: Audio files sorted by file name.

    Raises:
        FileNotFoundError: If ``directory`` does not exist.
        NotADirectoryError: If ``directory`` is not a directory.
    """
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"Album directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Album path is not a directory: {root}")

    files = sorted((entry for entry in root.iterdir() if is_audio_file(entry)), key=lambda p: p.name)
    logger.debug("Found %d audio files in %s", len(files), root)
    return files


__all__ = ["AUDIO_EXTENSIONS", "is_audio_file", "list_audio_files"]
