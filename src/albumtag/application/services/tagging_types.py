"""src/albumtag/application/services/tagging_types.py
Where: Application services layer.
What: Event identifiers, per-track results and run bookkeeping for album tagging.
Why: Keep the pipeline service lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from albumtag.shared.track_metadata import TrackMetadata


class TaggingEvent(StrEnum):
    """Structured event identifiers for tagging logs."""

    ALBUM_START = "tagging.album.start"
    ALBUM_COMPLETE = "tagging.album.complete"
    TRACK_TAGGED = "tagging.track.tagged"
    TRACK_RENAMED = "tagging.track.renamed"
    TRACK_PLANNED = "tagging.track.planned"
    TRACK_ERROR = "tagging.track.error"


class TrackCountMismatchError(Exception):
    """The album lists a different number of tracks than the directory holds."""

    expected: int
    found: int

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Album lists {expected} tracks but {found} audio files were found"
        )


@dataclass(slots=True)
class TrackResult:
    """Outcome of tagging (and renaming) one audio file."""

    source_path: Path
    metadata: TrackMetadata
    target_path: Path | None = None
    tagged: bool = False
    renamed: bool = False
    error_message: str | None = None

    @property
    def success(self) -> bool:
        """True when no step of this track failed."""
        return self.error_message is None


@dataclass(slots=True)
class TaggingRunContext:
    """Mutable bookkeeping for one album run."""

    directory: Path
    total_files: int
    dry_run: bool
    start_time: float = field(default_factory=time.perf_counter)
    tagged: int = 0
    renamed: int = 0
    failed: int = 0

    def duration_seconds(self) -> float:
        """Return the elapsed run time in seconds."""

        return time.perf_counter() - self.start_time


__all__ = [
    "TaggingEvent",
    "TaggingRunContext",
    "TrackCountMismatchError",
    "TrackResult",
]
