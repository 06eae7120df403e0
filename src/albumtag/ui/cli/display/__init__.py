"""Display components for the CLI."""

from .album import AlbumDisplay
from .preview import PreviewDisplay
from .result import ResultDisplay

__all__ = ["AlbumDisplay", "PreviewDisplay", "ResultDisplay"]
