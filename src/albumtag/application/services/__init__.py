"""Application services exposed to the UI layer."""

from .tag_album_service import TAG_WRITE_EXCEPTIONS, TagAlbumRequest, TagAlbumService
from .tagging_types import (
    TaggingEvent,
    TaggingRunContext,
    TrackCountMismatchError,
    TrackResult,
)

__all__ = [
    "TAG_WRITE_EXCEPTIONS",
    "TagAlbumRequest",
    "TagAlbumService",
    "TaggingEvent",
    "TaggingRunContext",
    "TrackCountMismatchError",
    "TrackResult",
]
