"""Tests for the shared TrackMetadata record."""

import dataclasses

import pytest

from albumtag.shared.track_metadata import TrackMetadata


def test_defaults_leave_optional_fields_absent() -> None:
    metadata = TrackMetadata(track_name="Solo")
    assert metadata.album_name is None
    assert metadata.track_number is None
    assert metadata.disc_number is None


def test_record_is_immutable() -> None:
    metadata = TrackMetadata(track_name="Solo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        metadata.track_name = "Other"  # pyright: ignore[reportAttributeAccessIssue]
