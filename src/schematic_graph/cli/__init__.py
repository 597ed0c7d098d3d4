"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="schematic-graph",
    help="schematic-graph - Part numbers and gear ratios from engine schematics",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """Analyze character-grid schematics."""
    if ctx.invoked_subcommand is not None:
        return

    if version:
        console.print(
            f"[bold cyan]schematic-graph[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    console.print(ctx.get_help())


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .entities import entities as _entities  # noqa: F401, E402
