"""
Summary: Rename a tagged audio file to its canonical "<NN> - <title>" name.
Why: Keep file names in the album directory consistent with the assigned metadata.
"""

from __future__ import annotations

from pathlib import Path

from albumtag.platform.logging import logger

from ..domain.sanitizer import UNKNOWN_EXTENSION, build_track_filename, file_extension


def plan_track_filename(
    original_path: Path,
    track_number: int,
    title: str,
    *,
    unknown_extension: str = UNKNOWN_EXTENSION,
) -> str:
    """Return the file name ``original_path`` would be renamed to."""
    extension = file_extension(original_path, default=unknown_extension)
    return build_track_filename(track_number, title, extension)


def rename_audio_file(
    original_path: Path | str,
    track_number: int,
    title: str,
    *,
    unknown_extension: str = UNKNOWN_EXTENSION,
) -> str:
    """Rename ``original_path`` within its parent directory.

    Args:
        original_path: File to rename.
        track_number: 1-based track number used as the name prefix.
        title: Track title; disallowed characters are stripped.
        unknown_extension: Extension used when the file has none.

    Returns:
        str: The new file name.

    Raises:
        FileExistsError: If a different file already has the new name.
        OSError: If the underlying rename fails.
    """
    source = Path(original_path)
    new_name = plan_track_filename(
        source, track_number, title, unknown_extension=unknown_extension
    )
    target = source.parent / new_name

    if target.exists() and not _same_file(source, target):
        raise FileExistsError(f"Refusing to overwrite existing file: {target}")

    logger.debug("Renaming %s -> %s", source, target)
    _ = source.rename(target)
    return new_name


def _same_file(source: Path, target: Path) -> bool:
    try:
        return source.samefile(target)
    except FileNotFoundError:
        return False


__all__ = ["plan_track_filename", "rename_audio_file"]
