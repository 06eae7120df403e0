"""Application service for tagging an album directory.

This layer wires the album loader, file discovery, tag writers and renamer
into the sequential per-track pipeline so that UIs only build a request.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, final

from mutagen import MutagenError

from albumtag.features.album import AlbumDescriptor, expand_tracks, load_album
from albumtag.features.files import list_audio_files, plan_track_filename, rename_audio_file
from albumtag.features.files.domain import UNKNOWN_EXTENSION
from albumtag.features.tagging import (
    AudioFileListerPort,
    FileRenamerPort,
    TagWriterLookupPort,
    UnsupportedFormatError,
    get_tag_writer,
)
from albumtag.platform.logging import logger
from albumtag.shared.track_metadata import TrackMetadata

from .tagging_types import (
    TaggingEvent,
    TaggingRunContext,
    TrackCountMismatchError,
    TrackResult,
)

TAG_WRITE_EXCEPTIONS: tuple[type[Exception], ...] = (
    MutagenError,
    OSError,
    UnsupportedFormatError,
)


@dataclass(frozen=True)
class TagAlbumRequest:
    """Input parameters for a tagging run.

    Attributes:
        config_path: Album TOML document.
        album_path: Directory holding the album's audio files.
        rename: Rename files to ``<NN> - <title>.<ext>`` after tagging.
        dry_run: If True, performs no file mutations.
        unknown_extension: Extension for renamed files that have none.
    """

    config_path: Path
    album_path: Path
    rename: bool = True
    dry_run: bool = False
    unknown_extension: str = UNKNOWN_EXTENSION


@final
class TagAlbumService:
    """Application service that tags and renames one album directory."""

    def __init__(
        self,
        *,
        album_loader: Callable[[Path], AlbumDescriptor] | None = None,
        file_lister: AudioFileListerPort | None = None,
        writer_lookup: TagWriterLookupPort | None = None,
        renamer: FileRenamerPort | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject light-weight doubles while production code relies on
        the filesystem and mutagen-backed defaults.
        """

        self._album_loader: Callable[[Path], AlbumDescriptor] = album_loader or load_album
        self._file_lister: AudioFileListerPort = file_lister or list_audio_files
        self._writer_lookup: TagWriterLookupPort = writer_lookup or get_tag_writer
        self._renamer: FileRenamerPort = renamer or rename_audio_file

    def load(self, config_path: Path) -> tuple[AlbumDescriptor, list[TrackMetadata]]:
        """Resolve the album document and expand it into track records."""

        album = self._album_loader(config_path)
        return album, expand_tracks(album)

    def run(self, request: TagAlbumRequest) -> list[TrackResult]:
        """Tag every audio file of the album directory in positional order.

        Args:
            request: Tagging run parameters.

        Returns:
            One ``TrackResult`` per audio file, in directory order.

        Raises:
            ConfigError: If the album document cannot be resolved.
            TrackCountMismatchError: If track and file counts differ; nothing is written.
            OSError: If the document or directory cannot be read.
        """

        _, tracks = self.load(request.config_path)
        files = self._file_lister(request.album_path)

        if len(files) != len(tracks):
            logger.error(
                "Track count mismatch: %d tracks in %s, %d audio files in %s",
                len(tracks),
                request.config_path,
                len(files),
                request.album_path,
            )
            raise TrackCountMismatchError(expected=len(tracks), found=len(files))

        context = TaggingRunContext(
            directory=request.album_path,
            total_files=len(files),
            dry_run=request.dry_run,
        )
        self._log(
            logging.INFO,
            TaggingEvent.ALBUM_START,
            "Tagging %d files in %s",
            context.total_files,
            request.album_path,
            directory=request.album_path,
            total_files=context.total_files,
            dry_run=request.dry_run,
        )

        results = [
            self._process_track(request, context, sequence, path, metadata)
            for sequence, (path, metadata) in enumerate(zip(files, tracks, strict=True), start=1)
        ]

        self._log(
            logging.INFO,
            TaggingEvent.ALBUM_COMPLETE,
            "Finished %s [tagged=%d, renamed=%d, failed=%d]",
            request.album_path,
            context.tagged,
            context.renamed,
            context.failed,
            directory=request.album_path,
            tagged=context.tagged,
            renamed=context.renamed,
            failed=context.failed,
            duration_seconds=context.duration_seconds(),
        )
        return results

    def _process_track(
        self,
        request: TagAlbumRequest,
        context: TaggingRunContext,
        sequence: int,
        path: Path,
        metadata: TrackMetadata,
    ) -> TrackResult:
        result = TrackResult(source_path=path, metadata=metadata)
        track_number = metadata.track_number or sequence
        log_context: dict[str, Any] = {
            "sequence": sequence,
            "total_files": context.total_files,
            "directory": context.directory,
            "source_path": path,
        }

        if request.dry_run:
            if request.rename:
                new_name = plan_track_filename(
                    path,
                    track_number,
                    metadata.track_name,
                    unknown_extension=request.unknown_extension,
                )
                result.target_path = path.parent / new_name
            self._log(
                logging.INFO,
                TaggingEvent.TRACK_PLANNED,
                "Would tag %s as %r",
                path,
                metadata.track_name,
                target_path=result.target_path,
                **log_context,
            )
            return result

        try:
            self._writer_lookup(path).write(metadata, path)
        except TAG_WRITE_EXCEPTIONS as exc:
            context.failed += 1
            result.error_message = f"Tagging failed: {exc}"
            self._log(
                logging.ERROR,
                TaggingEvent.TRACK_ERROR,
                "Error tagging %s: %s",
                path,
                exc,
                error_message=result.error_message,
                **log_context,
            )
            return result

        result.tagged = True
        context.tagged += 1
        self._log(
            logging.INFO,
            TaggingEvent.TRACK_TAGGED,
            "Assigned tags to %s",
            path,
            title=metadata.track_name,
            **log_context,
        )

        if not request.rename:
            return result

        try:
            new_name = self._renamer(
                path,
                track_number,
                metadata.track_name,
                unknown_extension=request.unknown_extension,
            )
        except OSError as exc:
            context.failed += 1
            result.error_message = f"Rename failed: {exc}"
            self._log(
                logging.ERROR,
                TaggingEvent.TRACK_ERROR,
                "Error renaming file %s: %s",
                path,
                exc,
                error_message=result.error_message,
                **log_context,
            )
            return result

        result.renamed = True
        result.target_path = path.parent / new_name
        context.renamed += 1
        self._log(
            logging.INFO,
            TaggingEvent.TRACK_RENAMED,
            "Renamed %s to %s",
            path,
            new_name,
            target_path=result.target_path,
            **log_context,
        )
        return result

    @staticmethod
    def _log(
        level: int,
        event: TaggingEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"tagging_event": event.value}
        for key, value in context.items():
            extra[key] = str(value) if isinstance(value, Path) else value
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["TAG_WRITE_EXCEPTIONS", "TagAlbumRequest", "TagAlbumService"]
