"""src/albumtag/ui/cli/display/preview.py
Where: CLI adapter layer for preview rendering.
What: Build a Rich table of the tags and file names a run would produce.
Why: Provide users with a safe, visual diff before applying changes.
"""

from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from albumtag.application.services import TrackResult

from .summary import render_tagging_summary


@final
class PreviewDisplay:
    """Handles preview display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize preview display."""
        self.console = console or Console()

    def show_preview(self, results: list[TrackResult], album_path: Path, quiet: bool = False) -> None:
        """Display the planned tags and renames for ``album_path``."""
        if quiet:
            return

        self.console.print(f"\n[bold cyan]Preview of planned changes in {escape(str(album_path))}:[/bold cyan]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Disc", justify="right")
        table.add_column("Current name")
        table.add_column("Planned name")
        table.add_column("Title")

        for result in results:
            metadata = result.metadata
            planned = result.target_path.name if result.target_path else "(unchanged)"
            table.add_row(
                str(metadata.track_number or ""),
                self._format_disc(metadata.disc_number, metadata.disc_total),
                result.source_path.name,
                planned,
                metadata.track_name,
            )

        self.console.print(table)

        render_tagging_summary(
            console=self.console,
            results=results,
            header_label="Preview Summary",
            total_label="Total files planned",
            success_label="Ready",
            failure_label="Blocked",
        )

    @staticmethod
    def _format_disc(disc_number: int | None, disc_total: int | None) -> str:
        if disc_number is None:
            return "-"
        if disc_total is None:
            return str(disc_number)
        return f"{disc_number}/{disc_total}"
