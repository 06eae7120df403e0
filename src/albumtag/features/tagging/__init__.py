# Path: `src/albumtag/features/tagging/__init__.py`
# Summary: Export tag writing ports and writers.
# Why: Provide a stable import surface for the application layer and tests.

from .usecases import (
    AudioFileListerPort,
    FileRenamerPort,
    TagWriter,
    TagWriterLookupPort,
    TagWriterPort,
    UnsupportedFormatError,
    get_tag_writer,
)

__all__ = [
    "AudioFileListerPort",
    "FileRenamerPort",
    "TagWriter",
    "TagWriterLookupPort",
    "TagWriterPort",
    "UnsupportedFormatError",
    "get_tag_writer",
]
