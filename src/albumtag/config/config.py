"""Configuration management for albumtag."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from albumtag.config.paths import default_config_path
from albumtag.platform.logging import logger

UNKNOWN_EXTENSION_DEFAULT = ".unknown"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Rename files after tagging unless --no-rename is given
    rename_files: bool = True

    # Extension given to renamed files that have none
    unknown_extension: str = UNKNOWN_EXTENSION_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not isinstance(self.unknown_extension, str) or not self.unknown_extension.strip():
            logger.warning(
                "Invalid unknown_extension %r; using %s",
                self.unknown_extension,
                UNKNOWN_EXTENSION_DEFAULT,
            )
            self.unknown_extension = UNKNOWN_EXTENSION_DEFAULT
        else:
            self.unknown_extension = self.unknown_extension.strip()

        if not self.unknown_extension.startswith("."):
            self.unknown_extension = f".{self.unknown_extension}"

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Destination file. Defaults to the portable config path.

        Returns:
            Path: File that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# albumtag Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/albumtag.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Rename files to '<NN> - <title>.<ext>' after tagging (default true)")
        lines.append(f"rename_files = {self._format_toml_value(config['rename_files'])}")
        lines.append("")

        lines.append("# Extension used when a renamed file has none")
        lines.append(
            f"unknown_extension = {self._format_toml_value(config['unknown_extension'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when absent.

        Args:
            path: Config file to read. Defaults to the portable config path.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("log_file", None)
                _ = config_dict.setdefault("rename_files", True)
                _ = config_dict.setdefault("unknown_extension", UNKNOWN_EXTENSION_DEFAULT)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()
                _ = instance.save(config_file)
                logger.info("Created default configuration at %s", config_file)

            cls._instance = instance
            return instance

        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached singleton so the next load re-reads the file."""
        cls._instance = None


__all__ = ["Config", "UNKNOWN_EXTENSION_DEFAULT"]
