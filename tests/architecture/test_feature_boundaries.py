"""
Summary: Architecture checks keeping the album and files features free of tag codecs and UI code.
Why: Album resolution and file naming must stay testable without mutagen or the CLI layer.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
FEATURES_DIR = REPO_ROOT / "src" / "albumtag" / "features"


def _offending_files(directory: Path, needle: str) -> list[Path]:
    return [
        path
        for path in directory.rglob("*.py")
        if needle in path.read_text(encoding="utf-8")
    ]


@pytest.mark.parametrize("feature", ["album", "files"])
@pytest.mark.parametrize("needle", ["mutagen", "albumtag.features.tagging", "albumtag.ui"])
def test_feature_does_not_import(feature: str, needle: str) -> None:
    """Ensure pure features avoid depending on tag writers and the UI."""

    offending = _offending_files(FEATURES_DIR / feature, needle)
    assert offending == [], (
        f"{feature} modules must not reference {needle}; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending)}"
    )


def test_features_do_not_import_application_layer() -> None:
    """Application services orchestrate features, never the other way round."""

    offending = _offending_files(FEATURES_DIR, "albumtag.application")
    assert offending == [], (
        "Feature modules must not import the application layer; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending)}"
    )
