"""Command line argument handling."""

from .options import ApplyArgs, CLIArgs, ShowArgs
from .parser import ArgumentParser

__all__ = ["ApplyArgs", "ArgumentParser", "CLIArgs", "ShowArgs"]
