"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import SchematicConfig, load_config
from ..exceptions import SchematicGraphError
from ..logging_config import setup_logging

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    fmt: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> SchematicConfig:
    """Build config from CLI options and configure logging from it."""
    if verbose and quiet:
        raise SchematicGraphError("--verbose and --quiet are mutually exclusive")
    settings = load_config(
        config_file=config,
        output_format=fmt,
        verbose=verbose,
        quiet=quiet,
        log_file=str(log_file) if log_file is not None else None,
    )
    setup_logging(verbose=settings.verbose, quiet=settings.quiet, log_file=settings.log_file)
    return settings
