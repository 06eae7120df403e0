"""Album domain: document access, descriptor resolution and track expansion."""

from .album import AlbumDescriptor, resolve_album
from .errors import (
    AlbumDocumentError,
    ConfigError,
    ConfigTypeError,
    KeyNotFoundError,
    MissingKeyError,
)
from .expansion import disc_number_for, expand_tracks, join_genres

__all__ = [
    "AlbumDescriptor",
    "AlbumDocumentError",
    "ConfigError",
    "ConfigTypeError",
    "KeyNotFoundError",
    "MissingKeyError",
    "disc_number_for",
    "expand_tracks",
    "join_genres",
    "resolve_album",
]
