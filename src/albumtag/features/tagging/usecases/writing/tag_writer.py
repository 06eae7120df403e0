"""Tag writing facade.

Where: src/albumtag/features/tagging/usecases/writing/tag_writer.py
What: Select the format writer for a file extension and delegate to it.
Why: Callers hand over a TrackMetadata and a path without knowing the container.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from albumtag.shared.track_metadata import TrackMetadata

from ._base_writers import AudioTagWriter
from .format_writers import AsfTagWriter, FlacTagWriter, Mp3TagWriter, OggVorbisTagWriter

__all__ = [
    "TagWriter",
    "UnsupportedFormatError",
    "get_tag_writer",
]


class UnsupportedFormatError(ValueError):
    """No tag writer is registered for a file extension."""

    extension: str

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension or '<none>'}")


class TagWriter:
    """Facade that routes tag writes by file extension."""

    _format_map: ClassVar[dict[str, AudioTagWriter]] = {
        ".mp3": Mp3TagWriter(),
        ".flac": FlacTagWriter(),
        ".ogg": OggVorbisTagWriter(),
        ".asf": AsfTagWriter(),
    }

    @classmethod
    def supported_extensions(cls) -> frozenset[str]:
        """Return the extensions (with leading dot) that can be written."""
        return frozenset(cls._format_map)

    @classmethod
    def for_path(cls, path: Path) -> AudioTagWriter:
        """Return the writer registered for ``path``'s extension.

        Raises:
            UnsupportedFormatError: If the extension has no writer.
        """
        extension = path.suffix.lower()
        writer = cls._format_map.get(extension)
        if writer is None:
            raise UnsupportedFormatError(extension)
        return writer

    @classmethod
    def write(cls, metadata: TrackMetadata, path: Path) -> None:
        """Write ``metadata`` into ``path`` with the matching format writer."""
        cls.for_path(path).write(metadata, path)


def get_tag_writer(path: Path) -> AudioTagWriter:
    """Return the tag writer for ``path`` (see ``TagWriter.for_path``)."""
    return TagWriter.for_path(path)
