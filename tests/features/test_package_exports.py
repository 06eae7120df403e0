"""tests/features/test_package_exports.py
What: Validate feature packages expose the names the application layer relies on.
Why: Prevent regressions when moving modules between domain and use case packages.
"""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    ("package", "expected_names"),
    [
        (
            "albumtag.features.album",
            {
                "AlbumDescriptor",
                "ConfigError",
                "ConfigTypeError",
                "KeyNotFoundError",
                "MissingKeyError",
                "disc_number_for",
                "expand_tracks",
                "load_album",
                "resolve_album",
            },
        ),
        (
            "albumtag.features.files",
            {"list_audio_files", "normalize", "plan_track_filename", "rename_audio_file"},
        ),
        (
            "albumtag.features.tagging",
            {"TagWriter", "TagWriterPort", "UnsupportedFormatError", "get_tag_writer"},
        ),
        (
            "albumtag.application.services",
            {"TagAlbumRequest", "TagAlbumService", "TrackResult", "TaggingEvent"},
        ),
    ],
)
def test_package_exports(package: str, expected_names: set[str]) -> None:
    module = import_module(package)
    for name in expected_names:
        assert hasattr(module, name), f"Missing export: {package}.{name}"
