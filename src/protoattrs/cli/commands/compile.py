from __future__ import annotations

from pathlib import Path

import click

from protoattrs.cli.common import build_registry
from protoattrs.cli.context import CLIContext, ExitCode
from protoattrs.cli.output import format_error, format_success
from protoattrs.emitters import ManifestEmitter
from protoattrs.exceptions import CompileError
from protoattrs.logging import get_logger

logger = get_logger(__name__)


@click.command("compile")
@click.option(
    "-o",
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the attribute manifest (overrides out_dir).",
)
@click.pass_context
def compile_command(ctx: click.Context, out_dir: Path | None) -> None:
    """Replay the configured steps and write the attribute manifest.

    Examples:
        protoattrs compile
        protoattrs -c build/protoattrs.yaml compile -o target/gen
    """
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    config = cli_ctx.config

    if not config.sources:
        logger.warning("no_sources_configured")

    emitter = ManifestEmitter(out_dir or config.out_dir, config.manifest_name)
    registry = build_registry(config, emitter)
    try:
        registry.compile(config.sources, config.include_paths)
    except CompileError as e:
        details = [f"Selector: {e.selector}"] if e.selector else None
        click.echo(format_error(e.message, details=details), err=True)
        ctx.exit(ExitCode.FAILURE)

    if not cli_ctx.quiet:
        click.echo(
            format_success(
                f"Wrote {len(registry.bindings)} attributes to {emitter.path}"
            )
        )
