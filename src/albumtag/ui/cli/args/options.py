"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ApplyArgs:
    """Command line arguments for the ``apply`` or ``plan`` subcommands."""

    command: Literal["apply", "plan"]
    config_path: Path
    album_path: Path
    dry_run: bool
    rename: bool
    unknown_extension: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    config_path: Path


CLIArgs = ApplyArgs | ShowArgs

__all__ = ["ApplyArgs", "CLIArgs", "ShowArgs"]
