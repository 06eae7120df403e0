"""Format-specific tag writers.

Where: src/albumtag/features/tagging/usecases/writing/format_writers.py
What: Concrete mutagen writers for MP3 (ID3v2), FLAC, Ogg Vorbis and ASF files.
Why: Keep each container's key names and cover-art handling in one small class.
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Any, ClassVar, override

from mutagen.asf import ASF
from mutagen.flac import FLAC, Picture
from mutagen.id3 import (
    APIC,
    ID3,
    TALB,
    TCON,
    TDRC,
    TIT2,
    TPE1,
    TPOS,
    TRCK,
    Encoding,
    ID3NoHeaderError,
    PictureType,
)
from mutagen.oggvorbis import OggVorbis

from albumtag.platform.logging import logger
from albumtag.shared.track_metadata import TrackMetadata

from ._base_writers import BaseMutagenWriter
from ._tag_utils import format_number_pair

__all__ = [
    "AsfTagWriter",
    "FlacTagWriter",
    "Mp3TagWriter",
    "OggVorbisTagWriter",
]

COVER_DESCRIPTION = "Cover"

VORBIS_TAG_MAPPING: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album": "album",
    "date": "date",
    "genre": "genre",
    "track": "tracknumber",
    "track_total": "tracktotal",
    "disc": "discnumber",
    "disc_total": "disctotal",
}


def _build_flac_picture(data: bytes, mime: str) -> Picture:
    picture = Picture()
    picture.type = PictureType.COVER_FRONT
    picture.mime = mime
    picture.desc = COVER_DESCRIPTION
    picture.data = data
    return picture


class Mp3TagWriter(BaseMutagenWriter):
    """Writer for MP3 files using ID3v2 frames.

    ID3 is opened directly so files without a tag (or without a valid MPEG
    stream) still receive one.
    """

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "date": "TDRC",
        "genre": "TCON",
        "track": "TRCK",
        "disc": "TPOS",
    }

    _FRAMES: ClassVar[dict[str, type]] = {
        "TIT2": TIT2,
        "TPE1": TPE1,
        "TALB": TALB,
        "TDRC": TDRC,
        "TCON": TCON,
        "TRCK": TRCK,
        "TPOS": TPOS,
    }

    @override
    def _open_file(self, path: Path) -> ID3:
        try:
            return ID3(path)
        except ID3NoHeaderError:
            logger.debug("No ID3 header in %s; starting a new tag", path)
            return ID3()

    @override
    def _tags(self, audio: Any) -> Any:
        return audio

    @override
    def _save(self, audio: Any, path: Path) -> None:
        audio.save(path)

    @override
    def _set_tag(self, tags: Any, key: str, value: str) -> None:
        frame_class = self._FRAMES[key]
        tags.setall(key, [frame_class(encoding=Encoding.UTF8, text=[value])])

    @override
    def _embed_picture(self, audio: Any, tags: Any, data: bytes, mime: str) -> None:
        tags.delall("APIC")
        tags.add(
            APIC(
                encoding=Encoding.UTF8,
                mime=mime,
                type=PictureType.COVER_FRONT,
                desc=COVER_DESCRIPTION,
                data=data,
            )
        )


class FlacTagWriter(BaseMutagenWriter):
    """Writer for FLAC files using Vorbis comments and picture blocks."""

    FILE_CLASS: ClassVar[type | None] = FLAC
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    TAG_MAPPING: ClassVar[dict[str, str]] = VORBIS_TAG_MAPPING
    SPLIT_TOTALS: ClassVar[bool] = True

    @override
    def _set_tag(self, tags: Any, key: str, value: str) -> None:
        tags[key] = [value]

    @override
    def _embed_picture(self, audio: Any, tags: Any, data: bytes, mime: str) -> None:
        audio.clear_pictures()
        audio.add_picture(_build_flac_picture(data, mime))


class OggVorbisTagWriter(BaseMutagenWriter):
    """Writer for Ogg Vorbis files; covers go into METADATA_BLOCK_PICTURE."""

    FILE_CLASS: ClassVar[type | None] = OggVorbis
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    TAG_MAPPING: ClassVar[dict[str, str]] = VORBIS_TAG_MAPPING
    SPLIT_TOTALS: ClassVar[bool] = True

    @override
    def _set_tag(self, tags: Any, key: str, value: str) -> None:
        tags[key] = [value]

    @override
    def _embed_picture(self, audio: Any, tags: Any, data: bytes, mime: str) -> None:
        encoded = base64.b64encode(_build_flac_picture(data, mime).write()).decode("ascii")
        tags["metadata_block_picture"] = [encoded]


class AsfTagWriter(BaseMutagenWriter):
    """Writer for ASF (WMA) files using WM/* attributes."""

    FILE_CLASS: ClassVar[type | None] = ASF
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Author",
        "album": "WM/AlbumTitle",
        "date": "WM/Year",
        "genre": "WM/Genre",
        "track": "WM/TrackNumber",
        "disc": "WM/PartOfSet",
    }
    SPLIT_TOTALS: ClassVar[bool] = True

    @override
    def field_values(self, metadata: TrackMetadata) -> dict[str, str]:
        values = super().field_values(metadata)
        # WM/PartOfSet conventionally carries "n/total".
        disc = format_number_pair(metadata.disc_number, metadata.disc_total)
        if disc is not None:
            values["disc"] = disc
        return values

    @override
    def _set_tag(self, tags: Any, key: str, value: str) -> None:
        tags[key] = [value]

    @override
    def _embed_picture(self, audio: Any, tags: Any, data: bytes, mime: str) -> None:
        logger.debug("Cover art embedding is not supported for ASF; skipping %s cover", mime)
