"""
Summary: Resolve a parsed album document into a validated AlbumDescriptor.
Why: Only the track list is mandatory; every other field degrades to absent instead of failing.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from albumtag.platform.logging import logger

from .document import (
    Document,
    get_integer,
    get_single_or_array_integer,
    get_single_or_array_string,
    get_string,
    get_string_array,
)
from .errors import ConfigTypeError, KeyNotFoundError, MissingKeyError

# Accepted key names per field, highest priority first.
ALBUM_KEYS: Final[tuple[str, ...]] = ("album", "album_name")
ARTIST_KEYS: Final[tuple[str, ...]] = ("artist", "artist_name", "album_artist")
YEAR_KEYS: Final[tuple[str, ...]] = ("year", "date")
GENRE_KEYS: Final[tuple[str, ...]] = ("genre", "genres")
PICTURE_KEYS: Final[tuple[str, ...]] = ("picture", "cover", "picture_path")
DISC_TOTAL_KEYS: Final[tuple[str, ...]] = ("disc_total", "total_discs")
TRACKS_PER_DISC_KEYS: Final[tuple[str, ...]] = ("tracks_per_disc",)
TRACKS_KEY: Final[str] = "tracks"

_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?P<year>\d{4})-\d{2}(?:-\d{2})?", re.ASCII)


@dataclass(slots=True, frozen=True)
class AlbumDescriptor:
    """Validated, typed view of one album document."""

    tracks: tuple[str, ...]
    album_name: str | None = None
    artist_name: str | None = None
    year: int | None = None
    genre: tuple[str, ...] = ()
    picture_path: Path | None = None
    disc_total: int | None = None
    tracks_per_disc: tuple[int, ...] | None = None


def _parse_count(raw: str) -> int | None:
    text = raw.strip()
    if text.isascii() and text.isdigit():
        return int(text)
    return None


def _parse_year(raw: str) -> int | None:
    """Parse ``2020`` or a date string such as ``2020-05`` or ``2020-05-01``.

    The whole string must match; trailing text makes the value unparsable.
    """
    count = _parse_count(raw)
    if count is not None:
        return count
    match = _DATE_PATTERN.fullmatch(raw.strip())
    if match is None:
        return None
    return int(match.group("year"))


def _lenient_count(doc: Document, keys: tuple[str, ...]) -> int | None:
    """Read a non-negative integer, accepting digit strings as well."""
    try:
        value = get_integer(doc, keys)
    except KeyNotFoundError:
        try:
            return _parse_count(get_string(doc, keys))
        except KeyNotFoundError:
            return None
    return value if value >= 0 else None


def _resolve_year(doc: Document) -> int | None:
    try:
        value = get_integer(doc, YEAR_KEYS)
    except KeyNotFoundError:
        pass
    else:
        return value if value >= 0 else None

    for key in YEAR_KEYS:
        raw = doc.get(key)
        # Unquoted TOML dates arrive as date/datetime objects.
        if isinstance(raw, datetime.date):
            return raw.year
        if isinstance(raw, str):
            parsed = _parse_year(raw)
            if parsed is not None:
                return parsed
    return None


def _resolve_picture_path(doc: Document) -> Path | None:
    """Join the configured picture against the process working directory."""
    try:
        raw = get_string(doc, PICTURE_KEYS)
    except KeyNotFoundError:
        return None
    if not raw.strip():
        return None

    try:
        cwd = Path.cwd()
    except OSError as exc:
        logger.warning("Cannot determine working directory for picture %r: %s", raw, exc)
        return None
    return cwd / raw


def _resolve_tracks_per_disc(doc: Document) -> tuple[int, ...] | None:
    try:
        counts = get_single_or_array_integer(doc, TRACKS_PER_DISC_KEYS)
    except KeyNotFoundError:
        return None
    if any(count < 0 for count in counts):
        logger.warning("Ignoring tracks_per_disc with negative counts: %s", counts)
        return None
    return tuple(counts)


def _optional_string(doc: Document, keys: tuple[str, ...]) -> str | None:
    try:
        return get_string(doc, keys)
    except KeyNotFoundError:
        return None


def _resolve_tracks(doc: Document) -> tuple[str, ...]:
    if TRACKS_KEY not in doc:
        raise MissingKeyError(TRACKS_KEY)
    try:
        tracks = get_string_array(doc, (TRACKS_KEY,))
    except KeyNotFoundError as exc:
        raise MissingKeyError(TRACKS_KEY) from exc
    if not tracks:
        raise ConfigTypeError(f"'{TRACKS_KEY}' must list at least one track title")
    return tuple(tracks)


def resolve_album(doc: Document) -> AlbumDescriptor:
    """Build an AlbumDescriptor from a parsed album document.

    Args:
        doc: Top-level table of the album document.

    Returns:
        AlbumDescriptor: Descriptor with every optional field resolved best-effort.

    Raises:
        MissingKeyError: If ``tracks`` is absent or not an array of strings.
        ConfigTypeError: If ``tracks`` is an empty array.
    """
    tracks = _resolve_tracks(doc)

    try:
        genre = tuple(get_single_or_array_string(doc, GENRE_KEYS))
    except KeyNotFoundError:
        genre = ()

    album = AlbumDescriptor(
        tracks=tracks,
        album_name=_optional_string(doc, ALBUM_KEYS),
        artist_name=_optional_string(doc, ARTIST_KEYS),
        year=_resolve_year(doc),
        genre=genre,
        picture_path=_resolve_picture_path(doc),
        disc_total=_lenient_count(doc, DISC_TOTAL_KEYS),
        tracks_per_disc=_resolve_tracks_per_disc(doc),
    )
    logger.debug("Resolved album descriptor: %s", album)
    return album


__all__ = [
    "ALBUM_KEYS",
    "ARTIST_KEYS",
    "AlbumDescriptor",
    "DISC_TOTAL_KEYS",
    "GENRE_KEYS",
    "PICTURE_KEYS",
    "TRACKS_KEY",
    "TRACKS_PER_DISC_KEYS",
    "YEAR_KEYS",
    "resolve_album",
]
