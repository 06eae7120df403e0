"""src/albumtag/ui/cli/commands/apply.py
What: Execute tagging runs (and their dry-run previews) via the CLI.
Why: Bridge parsed arguments with the application service.
"""

from typing import override

from albumtag.application.services import TrackResult
from albumtag.ui.cli.commands.executor import CommandExecutor


class ApplyCommand(CommandExecutor):
    """Command for tagging one album directory."""

    @override
    def execute(self) -> list[TrackResult]:
        """Execute the tagging run and render its outcome."""
        results = self.app.run(self.request)
        self.display_results(results)
        return results
