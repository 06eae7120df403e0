"""Tagging use cases: ports and mutagen-backed writers."""

from .ports import AudioFileListerPort, FileRenamerPort, TagWriterLookupPort, TagWriterPort
from .writing import TagWriter, UnsupportedFormatError, get_tag_writer

__all__ = [
    "AudioFileListerPort",
    "FileRenamerPort",
    "TagWriter",
    "TagWriterLookupPort",
    "TagWriterPort",
    "UnsupportedFormatError",
    "get_tag_writer",
]
