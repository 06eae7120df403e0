# Where: albumtag.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared records across features.

"""Shared cross-cutting records exposed at the package level."""

from .track_metadata import TrackMetadata

__all__ = ["TrackMetadata"]
