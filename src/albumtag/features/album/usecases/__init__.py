"""Album loading use cases."""

from .loader import load_album, load_album_document

__all__ = ["load_album", "load_album_document"]
