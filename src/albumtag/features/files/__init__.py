# Path: `src/albumtag/features/files/__init__.py`
# Summary: Export filename normalization, discovery and rename helpers.
# Why: Provide a stable import surface for the application layer and tests.

from .domain import DISALLOWED_CHARACTERS, build_track_filename, normalize
from .usecases import AUDIO_EXTENSIONS, list_audio_files, plan_track_filename, rename_audio_file

__all__ = [
    "AUDIO_EXTENSIONS",
    "DISALLOWED_CHARACTERS",
    "build_track_filename",
    "list_audio_files",
    "normalize",
    "plan_track_filename",
    "rename_audio_file",
]
