"""src/albumtag/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the application service and displays across commands.
"""

from abc import ABC, abstractmethod

from albumtag.application.services import TagAlbumRequest, TagAlbumService, TrackResult
from albumtag.ui.cli.args.options import ApplyArgs
from albumtag.ui.cli.display.preview import PreviewDisplay
from albumtag.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: ApplyArgs
    app: TagAlbumService
    request: TagAlbumRequest
    preview_display: PreviewDisplay
    result_display: ResultDisplay

    def __init__(self, args: ApplyArgs, app: TagAlbumService | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            app: Service override, mainly for tests.
        """
        self.args = args
        self.app = app or TagAlbumService()
        self.request = TagAlbumRequest(
            config_path=args.config_path,
            album_path=args.album_path,
            rename=args.rename,
            dry_run=args.dry_run,
            unknown_extension=args.unknown_extension,
        )
        self.preview_display = PreviewDisplay()
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> list[TrackResult]:
        """Execute the command.

        Returns:
            List of per-track results.
        """
        pass

    def display_results(self, results: list[TrackResult]) -> None:
        """Display command execution results."""
        if self.args.dry_run:
            self.preview_display.show_preview(results, self.args.album_path, quiet=self.args.quiet)
        else:
            self.result_display.show_results(results, quiet=self.args.quiet)
