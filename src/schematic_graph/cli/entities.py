"""Entities command — list extracted numbers and symbols with their neighbours."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..api import analyze_file
from ..exceptions import SchematicError, SchematicGraphError
from ..graph.models import AdjacencyGraph, Entity
from . import app
from ._common import console, resolve_config


@app.command()
def entities(
    path: Path = typer.Argument(
        ...,
        help="Schematic text file, one grid row per line",
        dir_okay=False,
    ),
    row: Optional[int] = typer.Option(
        None,
        "--row",
        "-r",
        help="Only show entities on this row (0-indexed)",
        min=0,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
):
    """
    List every number and symbol with its span and neighbours.

    [bold cyan]Examples:[/bold cyan]

      schematic-graph entities input.txt --row 3
    """
    try:
        settings = resolve_config(
            config=config, fmt=fmt, verbose=verbose, quiet=quiet, log_file=log_file
        )
        graph = analyze_file(path, config=settings).graph
    except (SchematicGraphError, SchematicError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    selected = [e for e in graph.entities() if row is None or e.row == row]
    if settings.output_format == "json":
        print(json.dumps([_entity_dict(graph, e) for e in selected], indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Value", style="cyan")
    table.add_column("Row", justify="right")
    table.add_column("Cols", justify="right")
    table.add_column("Neighbours")
    for entity in selected:
        neighbors = sorted(graph.neighbors(entity), key=Entity.sort_key)
        table.add_row(
            entity.kind.value,
            escape(str(entity.value)),
            str(entity.row),
            f"{entity.min_col}-{entity.max_col}",
            escape(", ".join(str(n.value) for n in neighbors)),
        )
    console.print(table)


def _entity_dict(graph: AdjacencyGraph, entity: Entity) -> dict:
    return {
        "kind": entity.kind.value,
        "value": entity.value,
        "row": entity.row,
        "min_col": entity.min_col,
        "max_col": entity.max_col,
        "neighbors": [
            {"kind": n.kind.value, "value": n.value, "row": n.row, "min_col": n.min_col}
            for n in sorted(graph.neighbors(entity), key=Entity.sort_key)
        ],
    }
