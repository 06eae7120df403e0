"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from albumtag.platform.logging import DEFAULT_LOG_FILE
from albumtag.ui.cli.args import ApplyArgs, ArgumentParser, ShowArgs


@pytest.fixture
def album_paths(tmp_path: Path) -> tuple[Path, Path]:
    """Create an album file and an album directory."""

    config_path = tmp_path / "album.toml"
    _ = config_path.write_text('tracks = ["One"]\n', encoding="utf-8")
    album_dir = tmp_path / "album"
    album_dir.mkdir()
    (album_dir / "one.mp3").touch()
    return config_path, album_dir


@pytest.fixture
def mock_config(mocker: MockerFixture) -> MagicMock:
    config = mocker.patch("albumtag.ui.cli.args.parser.Config")
    loaded = config.load.return_value
    loaded.log_file = None
    loaded.rename_files = True
    loaded.unknown_extension = ".unknown"
    return config


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    apply_args: Namespace = parser.parse_args(["apply", "album.toml", "music"])
    assert apply_args.command == "apply"
    assert apply_args.config_path == "album.toml"
    assert apply_args.album_path == "music"
    assert apply_args.dry_run is False
    assert apply_args.no_rename is False

    plan_args: Namespace = parser.parse_args(["plan", "album.toml", "music", "--no-rename"])
    assert plan_args.dry_run is True
    assert plan_args.no_rename is True

    show_args: Namespace = parser.parse_args(["show", "album.toml"])
    assert show_args.command == "show"


def test_verbose_and_quiet_are_exclusive() -> None:
    parser = ArgumentParser.create_parser()
    with pytest.raises(SystemExit):
        _ = parser.parse_args(["apply", "a.toml", "dir", "--verbose", "--quiet"])


def test_missing_subcommand_exits() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_apply(
    album_paths: tuple[Path, Path], mocker: MockerFixture, mock_config: MagicMock
) -> None:
    """Process apply arguments and coerce paths and logging levels."""

    config_path, album_dir = album_paths
    mock_setup_logger = mocker.patch("albumtag.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["apply", str(config_path), str(album_dir)])

    assert isinstance(args, ApplyArgs)
    assert args.config_path == config_path
    assert args.album_path == album_dir
    assert not args.dry_run
    assert args.rename
    assert args.unknown_extension == ".unknown"
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE


@pytest.mark.parametrize(
    ("flag", "level"),
    [("--verbose", logging.DEBUG), ("--quiet", logging.ERROR)],
)
def test_process_args_log_levels(
    album_paths: tuple[Path, Path],
    mocker: MockerFixture,
    mock_config: MagicMock,
    flag: str,
    level: int,
) -> None:
    config_path, album_dir = album_paths
    mock_setup_logger = mocker.patch("albumtag.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["plan", str(config_path), str(album_dir), flag])

    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_process_args_plan_and_no_rename(
    album_paths: tuple[Path, Path], mocker: MockerFixture, mock_config: MagicMock
) -> None:
    config_path, album_dir = album_paths
    _ = mocker.patch("albumtag.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["plan", str(config_path), str(album_dir), "--no-rename"])

    assert isinstance(args, ApplyArgs)
    assert args.dry_run
    assert not args.rename


def test_config_can_disable_renaming(
    album_paths: tuple[Path, Path], mocker: MockerFixture, mock_config: MagicMock
) -> None:
    config_path, album_dir = album_paths
    _ = mocker.patch("albumtag.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.rename_files = False

    args = ArgumentParser.process_args(["apply", str(config_path), str(album_dir)])

    assert isinstance(args, ApplyArgs)
    assert not args.rename


def test_configured_log_file_is_used(
    album_paths: tuple[Path, Path], mocker: MockerFixture, mock_config: MagicMock, tmp_path: Path
) -> None:
    config_path, _ = album_paths
    mock_setup_logger = mocker.patch("albumtag.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = tmp_path / "custom.log"

    args = ArgumentParser.process_args(["show", str(config_path)])

    assert args == ShowArgs(command="show", config_path=config_path)
    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "custom.log"


def test_process_args_invalid_paths(
    album_paths: tuple[Path, Path], mocker: MockerFixture, mock_config: MagicMock, tmp_path: Path
) -> None:
    """Missing config files and non-directory album paths exit with status 1."""

    config_path, album_dir = album_paths
    _ = mocker.patch("albumtag.ui.cli.args.parser.setup_logger")

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["apply", str(tmp_path / "missing.toml"), str(album_dir)])
    assert excinfo.value.code == 1

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["apply", str(config_path), str(album_dir / "one.mp3")])
    assert excinfo.value.code == 1

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["show", str(tmp_path / "missing.toml")])
    assert excinfo.value.code == 1
