"""Analyze command — part-number and gear-ratio sums for one schematic."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..api import analyze_file
from ..exceptions import SchematicError, SchematicGraphError
from ..graph.models import SchematicAnalysis
from ..logging_config import get_logger
from . import app
from ._common import console, resolve_config

logger = get_logger(__name__)


@app.command()
def analyze(
    path: Path = typer.Argument(
        ...,
        help="Schematic text file, one grid row per line",
        dir_okay=False,
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
    Sum the part numbers and gear ratios of a schematic.

    [bold cyan]Examples:[/bold cyan]

      schematic-graph analyze input.txt

      schematic-graph analyze input.txt --format json | jq .part_number_sum
    """
    try:
        settings = resolve_config(
            config=config, fmt=fmt, verbose=verbose, quiet=quiet, log_file=log_file
        )
        result = analyze_file(path, config=settings)

        if settings.output_format == "json":
            _output_json(result)
        else:
            _output_rich(result, path)

    except (SchematicGraphError, SchematicError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _output_json(result: SchematicAnalysis):
    """Machine-readable output."""
    output = {
        "part_number_sum": result.part_number_sum,
        "gear_ratio_sum": result.gear_ratio_sum,
        "part_numbers": result.part_numbers,
        "gear_ratios": result.gear_ratios,
        "summary": {
            "rows": result.graph.row_count,
            "entities": len(result.graph),
            "numbers": len(result.graph.numbers()),
            "symbols": len(result.graph.symbols()),
            "edges": result.graph.edge_count,
        },
    }
    print(json.dumps(output, indent=2))


def _output_rich(result: SchematicAnalysis, path: Path):
    graph = result.graph
    console.print()
    console.print(f"[bold cyan]SCHEMATIC — {escape(str(path))}[/bold cyan]")
    console.print(
        f"  {graph.row_count} rows, {len(graph.numbers())} numbers, "
        f"{len(graph.symbols())} symbols, {graph.edge_count} edges"
    )
    console.print()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Query")
    table.add_column("Count", justify="right")
    table.add_column("Sum", justify="right", style="green")
    table.add_row("Part numbers", str(len(result.part_numbers)), str(result.part_number_sum))
    table.add_row("Gear ratios", str(len(result.gears)), str(result.gear_ratio_sum))
    console.print(table)
