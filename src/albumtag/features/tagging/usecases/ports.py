"""Summary: Ports describing the collaborators of the tagging pipeline.
Why: Let the application service swap real filesystem and mutagen access for fakes in tests."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from albumtag.shared.track_metadata import TrackMetadata


@runtime_checkable
class TagWriterPort(Protocol):
    """Port for writing one track's metadata into one audio file."""

    def write(self, metadata: TrackMetadata, path: Path) -> None:
        """Persist ``metadata`` into ``path``, raising on failure."""
        ...


class TagWriterLookupPort(Protocol):
    """Port returning the tag writer for a given audio file."""

    def __call__(self, path: Path) -> TagWriterPort:
        ...


class AudioFileListerPort(Protocol):
    """Port listing the audio files of an album directory in pairing order."""

    def __call__(self, directory: Path) -> list[Path]:
        ...


class FileRenamerPort(Protocol):
    """Port renaming a file to its canonical track name."""

    def __call__(
        self,
        original_path: Path,
        track_number: int,
        title: str,
        *,
        unknown_extension: str,
    ) -> str:
        ...


__all__ = [
    "AudioFileListerPort",
    "FileRenamerPort",
    "TagWriterLookupPort",
    "TagWriterPort",
]
