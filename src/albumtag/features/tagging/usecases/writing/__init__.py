"""
Summary: Public surface for tag writing modules.
Why: Provide a stable import path for the pipeline service and tests.
"""

from ._base_writers import AudioTagWriter, BaseMutagenWriter
from .format_writers import AsfTagWriter, FlacTagWriter, Mp3TagWriter, OggVorbisTagWriter
from .tag_writer import TagWriter, UnsupportedFormatError, get_tag_writer

__all__ = [
    "AudioTagWriter",
    "AsfTagWriter",
    "BaseMutagenWriter",
    "FlacTagWriter",
    "Mp3TagWriter",
    "OggVorbisTagWriter",
    "TagWriter",
    "UnsupportedFormatError",
    "get_tag_writer",
]
