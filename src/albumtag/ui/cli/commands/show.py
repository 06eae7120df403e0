"""src/albumtag/ui/cli/commands/show.py
What: Print a resolved album and its expanded tracks.
Why: Let users check an album file before any audio file is touched.
"""

from typing import final

from albumtag.application.services import TagAlbumService
from albumtag.shared.track_metadata import TrackMetadata
from albumtag.ui.cli.args.options import ShowArgs
from albumtag.ui.cli.display.album import AlbumDisplay


@final
class ShowCommand:
    """Command for the ``show`` subcommand."""

    def __init__(self, args: ShowArgs, app: TagAlbumService | None = None) -> None:
        self.args = args
        self.app = app or TagAlbumService()
        self.display = AlbumDisplay()

    def execute(self) -> list[TrackMetadata]:
        """Resolve the album, print it and return the expanded tracks."""
        album, tracks = self.app.load(self.args.config_path)
        self.display.show_album(album, tracks)
        return tracks
