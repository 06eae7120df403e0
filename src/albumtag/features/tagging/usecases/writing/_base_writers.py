"""Shared base classes for tag writers.

Where: src/albumtag/features/tagging/usecases/writing/_base_writers.py
What: Abstract writer contract plus the mutagen open/populate/save template.
Why: Per-format writers only describe their tag keys and picture embedding.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, override

from mutagen import MutagenError

from albumtag.platform.logging import logger
from albumtag.shared.track_metadata import TrackMetadata

from ._tag_utils import format_number_pair, read_picture

__all__ = [
    "AudioTagWriter",
    "BaseMutagenWriter",
]


class AudioTagWriter(abc.ABC):
    """Abstract base class for audio tag writers."""

    @abc.abstractmethod
    def write(self, metadata: TrackMetadata, path: Path) -> None:
        """Write ``metadata`` into the file at ``path``."""
        raise NotImplementedError


class BaseMutagenWriter(AudioTagWriter, abc.ABC):
    """Base class for writers backed by a mutagen file type."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    # Logical field -> format specific key; fields missing here are not written.
    TAG_MAPPING: ClassVar[dict[str, str]] = {}

    # Whether totals are stored in their own keys instead of "n/total".
    SPLIT_TOTALS: ClassVar[bool] = False

    def _open_file(self, path: Path) -> Any:
        """Open the audio file through mutagen."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        return self.FILE_CLASS(path, **self.FILE_INIT_PARAMS)

    def _tags(self, audio: Any) -> Any:
        """Return the writable tag container, creating it when missing."""
        if audio.tags is None:
            audio.add_tags()
        return audio.tags

    def _save(self, audio: Any, path: Path) -> None:
        del path
        audio.save()

    @abc.abstractmethod
    def _set_tag(self, tags: Any, key: str, value: str) -> None:
        """Store one text value under ``key``."""
        raise NotImplementedError

    @abc.abstractmethod
    def _embed_picture(self, audio: Any, tags: Any, data: bytes, mime: str) -> None:
        """Replace any existing front cover with ``data``."""
        raise NotImplementedError

    def field_values(self, metadata: TrackMetadata) -> dict[str, str]:
        """Map metadata onto logical tag fields, skipping absent values."""
        if self.SPLIT_TOTALS:
            track = format_number_pair(metadata.track_number, None)
            disc = format_number_pair(metadata.disc_number, None)
        else:
            track = format_number_pair(metadata.track_number, metadata.track_total)
            disc = format_number_pair(metadata.disc_number, metadata.disc_total)

        candidates: dict[str, str | None] = {
            "title": metadata.track_name,
            "artist": metadata.artist_name,
            "album": metadata.album_name,
            "date": str(metadata.year) if metadata.year is not None else None,
            "genre": metadata.genre,
            "track": track,
            "disc": disc,
        }
        if self.SPLIT_TOTALS:
            candidates["track_total"] = (
                str(metadata.track_total) if metadata.track_total is not None else None
            )
            candidates["disc_total"] = (
                str(metadata.disc_total) if metadata.disc_total is not None else None
            )
        return {key: value for key, value in candidates.items() if value is not None}

    @override
    def write(self, metadata: TrackMetadata, path: Path) -> None:
        """Write ``metadata`` (and the cover picture, if any) into ``path``.

        Raises:
            MutagenError: If mutagen cannot read or save the file.
            OSError: If the audio file or cover picture cannot be accessed.
        """
        writer_name = self.__class__.__name__.replace("TagWriter", "")
        try:
            picture = read_picture(metadata.picture_path) if metadata.picture_path else None

            audio = self._open_file(path)
            tags = self._tags(audio)
            for field, value in self.field_values(metadata).items():
                key = self.TAG_MAPPING.get(field)
                if not key:
                    continue
                self._set_tag(tags, key, value)
                logger.debug("Set %s tag %s=%r on %s", writer_name, key, value, path)

            if picture is not None:
                data, mime = picture
                self._embed_picture(audio, tags, data, mime)
                logger.debug("Embedded %s cover (%d bytes) into %s", mime, len(data), path)

            self._save(audio, path)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write %s tags to %s: %s", writer_name, path, exc)
            raise
