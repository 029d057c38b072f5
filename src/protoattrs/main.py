"""CLI entry point for protoattrs."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from protoattrs.logging import configure_logging

# PROTOATTRS_* variables may live in a project .env
load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

from protoattrs import __version__  # noqa: E402
from protoattrs.cli.commands.compile import compile_command  # noqa: E402
from protoattrs.cli.commands.show import show  # noqa: E402
from protoattrs.cli.context import CLIContext, ExitCode  # noqa: E402
from protoattrs.cli.output import format_error  # noqa: E402
from protoattrs.config import load_config  # noqa: E402
from protoattrs.exceptions import ConfigError  # noqa: E402

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


@click.group()
@click.version_option(version=__version__, prog_name="protoattrs")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file (defaults to ./protoattrs.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress non-essential output (ERROR level only).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: int,
    quiet: bool,
) -> None:
    """protoattrs - attribute overlay for generated protobuf code."""
    ctx.ensure_object(dict)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details), err=True)
        ctx.exit(ExitCode.FAILURE)

    # quiet > verbose > config
    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = _VERBOSITY_LEVELS[config.verbosity]
    configure_logging(level=level)

    ctx.obj["cli_ctx"] = CLIContext(
        config=config,
        config_path=config_file,
        verbosity=verbose,
        quiet=quiet,
    )


cli.add_command(compile_command)
cli.add_command(show)


if __name__ == "__main__":
    cli()
