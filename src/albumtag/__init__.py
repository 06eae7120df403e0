"""albumtag: apply album metadata from one TOML document to a directory of audio files."""

__version__ = "0.3.0"
