"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from albumtag.config.config import Config
from albumtag.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from albumtag.ui.cli.args.options import ApplyArgs, CLIArgs, ShowArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="albumtag",
            description="albumtag - Tag and rename the audio files of an album from a TOML description.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        apply_parser = subparsers.add_parser(
            "apply",
            help="Write tags to every audio file of the album and rename them",
        )
        ArgumentParser._configure_apply_parser(apply_parser, dry_run_default=False)

        plan_parser = subparsers.add_parser(
            "plan",
            help="Preview tagging and renaming without touching any file",
        )
        ArgumentParser._configure_apply_parser(plan_parser, dry_run_default=True)

        show_parser = subparsers.add_parser(
            "show",
            help="Print the resolved album and its expanded track list",
        )
        _ = show_parser.add_argument(
            "config_path",
            type=str,
            help="Path to the album TOML file",
            metavar="CONFIG_PATH",
        )
        _ = show_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output while resolving the album",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command in {"apply", "plan"}:
            return ArgumentParser._process_apply(parsed_args, configuration)

        if command == "show":
            return ShowArgs(
                command="show",
                config_path=ArgumentParser._require_config_file(parsed_args.config_path),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_apply_parser(
        parser: argparse.ArgumentParser,
        *,
        dry_run_default: bool,
    ) -> None:
        """Apply shared configuration for apply-style subparsers."""

        parser.set_defaults(dry_run=dry_run_default)
        _ = parser.add_argument(
            "config_path",
            type=str,
            help="Path to the album TOML file",
            metavar="CONFIG_PATH",
        )
        _ = parser.add_argument(
            "album_path",
            type=str,
            help="Directory holding the album's audio files",
            metavar="ALBUM_PATH",
        )
        _ = parser.add_argument(
            "--no-rename",
            action="store_true",
            help="Only write tags; keep the current file names",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _require_config_file(raw_path: str) -> Path:
        config_path = Path(raw_path)
        if not config_path.is_file():
            logger.error("Album config file does not exist: %s", config_path)
            sys.exit(1)
        return config_path

    @staticmethod
    def _process_apply(parsed_args: argparse.Namespace, configuration: Config) -> ApplyArgs:
        config_path = ArgumentParser._require_config_file(parsed_args.config_path)

        album_path = Path(parsed_args.album_path)
        if not album_path.is_dir():
            logger.error("Album path does not exist or is not a directory: %s", album_path)
            sys.exit(1)

        return ApplyArgs(
            command=parsed_args.command,
            config_path=config_path,
            album_path=album_path,
            dry_run=parsed_args.dry_run,
            rename=configuration.rename_files and not parsed_args.no_rename,
            unknown_extension=configuration.unknown_extension,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
