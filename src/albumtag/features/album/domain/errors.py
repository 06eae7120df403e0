"""
Summary: Exception hierarchy raised while reading an album document.
Why: Callers distinguish a missing mandatory field from a malformed one without parsing messages.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ConfigError(Exception):
    """Base class for album configuration failures."""


class MissingKeyError(ConfigError):
    """A mandatory field had no usable value."""

    key: str

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing key: {key}")


class KeyNotFoundError(MissingKeyError):
    """No candidate key both exists and holds a value of the requested shape."""

    keys: tuple[str, ...]

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys = tuple(keys)
        super().__init__("No matching key found")


class ConfigTypeError(ConfigError):
    """A present value cannot be used for a mandatory field."""

    description: str

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Type error: {description}")


class AlbumDocumentError(ConfigError):
    """The album document could not be parsed as TOML."""

    path: Path

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid album document {path}: {reason}")


__all__ = [
    "AlbumDocumentError",
    "ConfigError",
    "ConfigTypeError",
    "KeyNotFoundError",
    "MissingKeyError",
]
