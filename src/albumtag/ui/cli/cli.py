"""Command line interface for albumtag."""

import sys
from typing import final

from albumtag.application.services import TrackCountMismatchError
from albumtag.features.album import ConfigError
from albumtag.platform.logging import logger
from albumtag.ui.cli.args import ArgumentParser
from albumtag.ui.cli.args.options import ApplyArgs, CLIArgs, ShowArgs
from albumtag.ui.cli.commands import ApplyCommand, ShowCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ApplyArgs):
                results = ApplyCommand(args).execute()
                if any(not r.success for r in results):
                    sys.exit(1)
                return

            assert isinstance(args, ShowArgs)
            _ = ShowCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (ConfigError, TrackCountMismatchError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("File error: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on failures, so this return is only reached when
        every track succeeded.
    """
    CommandProcessor.process_command()
    return 0
