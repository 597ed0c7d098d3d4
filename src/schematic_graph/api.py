"""Public API for schematic-graph.

Example:
    >>> from schematic_graph import analyze
    >>>
    >>> result = analyze(["467..114..", "...*......", "..35..633."])
    >>> result.part_numbers
    [467, 35]
    >>> result.gear_ratios
    [16345]
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .config import SchematicConfig, load_config
from .file_ops import read_schematic
from .graph.builder import build_adjacency_graph
from .graph.models import SchematicAnalysis
from .graph.queries import gears, part_numbers
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(rows: Sequence[str], validate: bool = True) -> SchematicAnalysis:
    """Analyze in-memory schematic rows.

    Builds the full adjacency graph first, then runs both queries over it.
    An empty sequence is valid and yields empty results.
    """
    graph = build_adjacency_graph(rows, validate=validate)
    result = SchematicAnalysis(
        graph=graph,
        part_numbers=part_numbers(graph),
        gears=gears(graph),
    )
    logger.debug(
        f"Found {len(result.part_numbers)} part numbers and {len(result.gears)} gears"
    )
    return result


def analyze_file(
    path: str | Path,
    config_file: Optional[Path] = None,
    config: Optional[SchematicConfig] = None,
    **overrides,
) -> SchematicAnalysis:
    """Read a schematic file and analyze it.

    Args:
        path: Schematic text file, one grid row per line
        config_file: Optional explicit config file path
        config: Already-resolved configuration; skips loading when given
        **overrides: Configuration overrides (e.g., strip_whitespace=True)

    Raises:
        FileAccessError: If the file cannot be read
        SchematicGraphError: If configuration is invalid
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)
    rows = read_schematic(
        Path(path),
        encoding=config.encoding,
        strip_whitespace=config.strip_whitespace,
    )
    return analyze(rows, validate=config.enable_validation)
