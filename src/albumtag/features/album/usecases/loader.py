"""
Summary: Read an album TOML file from disk and resolve it into an AlbumDescriptor.
Why: Keep file I/O and TOML decoding out of the pure resolution domain.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from albumtag.platform.logging import logger

from ..domain.album import AlbumDescriptor, resolve_album
from ..domain.errors import AlbumDocumentError


def load_album_document(path: Path | str) -> dict[str, Any]:
    """Parse the album file at ``path`` into its top-level table.

    Raises:
        OSError: If the file cannot be read.
        AlbumDocumentError: If the file is not valid TOML.
    """
    document_path = Path(path)
    with open(document_path, "rb") as handle:
        try:
            document = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise AlbumDocumentError(document_path, str(exc)) from exc
    logger.debug("Loaded album document %s with keys %s", document_path, sorted(document))
    return document


def load_album(path: Path | str) -> AlbumDescriptor:
    """Load and resolve the album described by the TOML file at ``path``."""
    return resolve_album(load_album_document(path))


__all__ = ["load_album", "load_album_document"]
