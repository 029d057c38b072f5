from __future__ import annotations

import click
from rich.text import Text

from protoattrs.cli.common import build_registry
from protoattrs.cli.console import console
from protoattrs.cli.context import CLIContext, ExitCode
from protoattrs.cli.output import format_error


@click.command()
@click.argument("selector", required=False)
@click.pass_context
def show(ctx: click.Context, selector: str | None) -> None:
    """Print the attribute block registered for each entity.

    Without SELECTOR every entity is shown, in first-registration order.

    Examples:
        protoattrs show
        protoattrs show todo.TodoStatus
    """
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    registry = build_registry(cli_ctx.config)

    known = registry.selectors()
    if selector is not None and selector not in known:
        click.echo(
            format_error(f"No attributes registered for '{selector}'"), err=True
        )
        ctx.exit(ExitCode.FAILURE)

    for name in [selector] if selector is not None else known:
        console.print(Text(name, style="bold cyan"))
        for binding in registry.bindings:
            if binding.selector != name:
                continue
            for line in binding.text.split("\n"):
                # Text is never parsed as rich markup; attribute syntax stays raw
                console.print(
                    Text.assemble(f"  {binding.level.value:<7} ", line),
                    soft_wrap=True,
                )
        console.print()
