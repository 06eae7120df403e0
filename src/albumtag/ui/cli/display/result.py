"""src/albumtag/ui/cli/display/result.py
What: Render the user-facing summary of a tagging run.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from albumtag.application.services import TrackResult

from .summary import render_tagging_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_results(self, results: list[TrackResult], quiet: bool = False) -> None:
        """Display tagging results.

        Args:
            results: List of per-track results.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        render_tagging_summary(
            console=self.console,
            results=results,
            header_label="Tagging Summary",
            total_label="Total files processed",
            success_label="Successful",
            failure_label="Failed",
        )
