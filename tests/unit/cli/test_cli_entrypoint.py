"""Unit tests for global CLI options in main.py."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from protoattrs import __version__
from protoattrs.main import cli


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "compile" in result.output
    assert "show" in result.output


def test_invalid_config_exits_with_field(
    cli_runner: CliRunner, clean_env: None, temp_dir: Path
) -> None:
    bad = temp_dir / "bad.yaml"
    bad.write_text("steps:\n  - capability: serde\n")

    result = cli_runner.invoke(cli, ["--config", str(bad), "show"])

    assert result.exit_code == 1
    assert "Error: Invalid configuration" in result.output
    assert "Field: steps.0" in result.output


def test_missing_config_file_exits(
    cli_runner: CliRunner, clean_env: None, temp_dir: Path
) -> None:
    result = cli_runner.invoke(
        cli, ["--config", str(temp_dir / "absent.yaml"), "show"]
    )

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_quiet_beats_verbose(cli_runner: CliRunner, todo_project: Path) -> None:
    with patch("protoattrs.main.configure_logging") as configure:
        result = cli_runner.invoke(cli, ["-q", "-vv", "show"])

    assert result.exit_code == 0
    configure.assert_called_once_with(level=logging.ERROR)


def test_verbose_levels(cli_runner: CliRunner, todo_project: Path) -> None:
    with patch("protoattrs.main.configure_logging") as configure:
        cli_runner.invoke(cli, ["-v", "show"])
        cli_runner.invoke(cli, ["-vv", "show"])

    assert [c.kwargs["level"] for c in configure.call_args_list] == [
        logging.INFO,
        logging.DEBUG,
    ]


def test_config_verbosity_used_by_default(
    cli_runner: CliRunner, todo_project: Path
) -> None:
    (todo_project / "protoattrs.yaml").write_text("verbosity: info\n")

    with patch("protoattrs.main.configure_logging") as configure:
        cli_runner.invoke(cli, ["show"])

    configure.assert_called_once_with(level=logging.INFO)
