"""Command executors for the CLI."""

from .apply import ApplyCommand
from .executor import CommandExecutor
from .show import ShowCommand

__all__ = ["ApplyCommand", "CommandExecutor", "ShowCommand"]
