"""src/albumtag/ui/cli/display/album.py
What: Render a resolved album as a key/value panel followed by its track table.
Why: Back the ``show`` command with the same Rich styling as the other views.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from albumtag.features.album import AlbumDescriptor
from albumtag.features.album.domain.expansion import join_genres
from albumtag.shared.track_metadata import TrackMetadata

_ABSENT = "-"


@final
class AlbumDisplay:
    """Handles album display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize album display."""
        self.console = console or Console()

    def show_album(self, album: AlbumDescriptor, tracks: Sequence[TrackMetadata]) -> None:
        """Print ``album`` and the tracks expanded from it."""
        summary = Table.grid(padding=(0, 2))
        summary.add_column(style="bold")
        summary.add_column()
        for label, value in self._album_rows(album):
            summary.add_row(label, value)

        self.console.print(Panel(summary, title="Album", expand=False))

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Disc", justify="right")
        table.add_column("Title")
        for track in tracks:
            disc = _ABSENT if track.disc_number is None else str(track.disc_number)
            table.add_row(f"{track.track_number}/{track.track_total}", disc, track.track_name)
        self.console.print(table)

    @staticmethod
    def _album_rows(album: AlbumDescriptor) -> list[tuple[str, str]]:
        tracks_per_disc = (
            ", ".join(str(count) for count in album.tracks_per_disc)
            if album.tracks_per_disc is not None
            else None
        )
        values: list[tuple[str, object | None]] = [
            ("Album", album.album_name),
            ("Artist", album.artist_name),
            ("Year", album.year),
            ("Genre", join_genres(album.genre)),
            ("Cover", album.picture_path),
            ("Discs", album.disc_total),
            ("Tracks per disc", tracks_per_disc),
            ("Tracks", len(album.tracks)),
        ]
        return [(label, _ABSENT if value is None else str(value)) for label, value in values]
