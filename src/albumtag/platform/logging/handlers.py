"""Rich console handler that renders structured tagging events.

Where: platform/logging/handlers.py
What: ``RichHandler`` subclass styling ``tagging_event`` log records with icons and paths.
Why: Keep per-track progress readable without every call site formatting its own output.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TaggingRichHandler(RichHandler):
    """Rich handler with dedicated rendering for tagging events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tagging.album.start": ("🚀", "cyan"),
        "tagging.album.complete": ("✅", "green"),
        "tagging.track.tagged": ("🏷️", "blue"),
        "tagging.track.renamed": ("📦", "magenta"),
        "tagging.track.planned": ("📝", "yellow"),
        "tagging.track.error": ("⛔", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "tagging.track.tagged": "Tagged ",
        "tagging.track.renamed": "Renamed ",
        "tagging.track.planned": "Planned ",
        "tagging.track.error": "Failed ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Render ``path`` relative to ``base`` when possible, separators in magenta."""

        pure_path = self._to_pure_path(path)
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative = pure_path.relative_to(base_path)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                pure_path = relative

        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        text = Text()
        for char in str(pure_path):
            color = "magenta" if char in {"/", "\\"} else "white"
            _ = text.append(char, style=Style(color=color))
        if not text.plain:
            _ = text.append(separator)
        return text

    def _render_album_event(self, event: str, record: logging.LogRecord, body: Text) -> None:
        details: list[str] = []
        if event == "tagging.album.start":
            _ = body.append("Album start")
            total_files = getattr(record, "total_files", None)
            if isinstance(total_files, int):
                details.append(f"tracks={total_files}")
            if getattr(record, "dry_run", False):
                details.append("dry-run")
        else:
            _ = body.append("Album complete")
            for name in ("tagged", "renamed", "failed"):
                value = getattr(record, name, None)
                if isinstance(value, int):
                    details.append(f"{name}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

    def _render_track_event(self, event: str, record: logging.LogRecord, body: Text) -> None:
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        base = getattr(record, "directory", None)
        base_str = str(base) if base else None
        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path), base=base_str))

        target_path = getattr(record, "target_path", None)
        if event in {"tagging.track.renamed", "tagging.track.planned"} and target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path), base=base_str))

        if event == "tagging.track.tagged":
            title = getattr(record, "title", None)
            if title:
                _ = body.append(f" ({title})")
        elif event == "tagging.track.error":
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

    def _render_tagging_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured tagging events with dedicated styling."""

        event = getattr(record, "tagging_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event.startswith("tagging.album"):
            self._render_album_event(event, record, body)
        else:
            self._render_track_event(event, record, body)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for tagging events."""

        tagging_text = self._render_tagging_message(record)
        if tagging_text is not None:
            return tagging_text

        if record.levelno >= logging.ERROR:
            return Text(message, style=Style(color="red"))
        if record.levelno >= logging.WARNING:
            return Text(message, style=Style(color="yellow"))
        return super().render_message(record, message)


__all__ = ["TaggingRichHandler"]
