# Path: `src/albumtag/features/album/__init__.py`
# Summary: Export album feature domain and use case symbols.
# Why: Provide a stable import surface for the application layer and tests.

from .domain import (
    AlbumDescriptor,
    AlbumDocumentError,
    ConfigError,
    ConfigTypeError,
    KeyNotFoundError,
    MissingKeyError,
    disc_number_for,
    expand_tracks,
    resolve_album,
)
from .usecases import load_album, load_album_document

__all__ = [
    "AlbumDescriptor",
    "AlbumDocumentError",
    "ConfigError",
    "ConfigTypeError",
    "KeyNotFoundError",
    "MissingKeyError",
    "disc_number_for",
    "expand_tracks",
    "load_album",
    "load_album_document",
    "resolve_album",
]
