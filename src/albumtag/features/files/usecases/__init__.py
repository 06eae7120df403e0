"""File discovery and renaming use cases."""

from .discovery import AUDIO_EXTENSIONS, is_audio_file, list_audio_files
from .renamer import plan_track_filename, rename_audio_file

__all__ = [
    "AUDIO_EXTENSIONS",
    "is_audio_file",
    "list_audio_files",
    "plan_track_filename",
    "rename_audio_file",
]
