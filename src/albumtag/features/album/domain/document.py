"""
Summary: Shape-checked lookups over a parsed album document.
Why: Album files are loosely typed; callers ask for one shape and get it or KeyNotFoundError.
"""

# Where: src/albumtag/features/album/domain/document.py
# What: Narrowing accessors (string, integer, arrays, single-or-array) with key fallbacks.
# Assumptions: - Documents come from tomllib, so values are str/int/bool/float/list/dict/datetime.
# Trade-offs: - Wrong-shaped values are reported exactly like absent ones.

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar, cast

from .errors import KeyNotFoundError

DocumentValue = str | int | list["DocumentValue"] | dict[str, "DocumentValue"]
Document = Mapping[str, object]

_T = TypeVar("_T")


def _is_integer(value: object) -> bool:
    # TOML booleans parse to bool, which is an int subclass.
    return isinstance(value, int) and not isinstance(value, bool)


def _as_string(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _as_integer(value: object) -> int | None:
    return cast(int, value) if _is_integer(value) else None


def _as_string_list(value: object) -> list[str] | None:
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)


def _as_integer_list(value: object) -> list[int] | None:
    if not isinstance(value, list):
        return None
    if not all(_is_integer(item) for item in value):
        return None
    return list(value)


def _as_single_or_string_list(value: object) -> list[str] | None:
    if isinstance(value, str):
        return [value]
    return _as_string_list(value)


def _as_single_or_integer_list(value: object) -> list[int] | None:
    if _is_integer(value):
        return [cast(int, value)]
    return _as_integer_list(value)


def _first_match(
    doc: Document,
    keys: Sequence[str],
    narrow: Callable[[object], _T | None],
) -> _T:
    """Return the first candidate whose value survives ``narrow``.

    Args:
        doc: Parsed document table.
        keys: Candidate key names in priority order.
        narrow: Converter returning ``None`` when the value has the wrong shape.

    Returns:
        The narrowed value of the first usable key.

    Raises:
        KeyNotFoundError: If no candidate exists with the requested shape.
    """
    for key in keys:
        if key not in doc:
            continue
        narrowed = narrow(doc[key])
        if narrowed is None:
            continue
        return narrowed
    raise KeyNotFoundError(keys)


def get_string(doc: Document, keys: Sequence[str]) -> str:
    """Return the first string-valued candidate key."""
    return _first_match(doc, keys, _as_string)


def get_integer(doc: Document, keys: Sequence[str]) -> int:
    """Return the first integer-valued candidate key (booleans excluded)."""
    return _first_match(doc, keys, _as_integer)


def get_string_array(doc: Document, keys: Sequence[str]) -> list[str]:
    """Return the first candidate holding an array made only of strings.

    Mixed arrays are skipped as a whole; no element is coerced.
    """
    return _first_match(doc, keys, _as_string_list)


def get_integer_array(doc: Document, keys: Sequence[str]) -> list[int]:
    """Return the first candidate holding an array made only of integers."""
    return _first_match(doc, keys, _as_integer_list)


def get_single_or_array_string(doc: Document, keys: Sequence[str]) -> list[str]:
    """Return a bare string wrapped in a list, or an all-string array."""
    return _first_match(doc, keys, _as_single_or_string_list)


def get_single_or_array_integer(doc: Document, keys: Sequence[str]) -> list[int]:
    """Return a bare integer wrapped in a list, or an all-integer array."""
    return _first_match(doc, keys, _as_single_or_integer_list)


__all__ = [
    "Document",
    "DocumentValue",
    "get_integer",
    "get_integer_array",
    "get_single_or_array_integer",
    "get_single_or_array_string",
    "get_string",
    "get_string_array",
]
