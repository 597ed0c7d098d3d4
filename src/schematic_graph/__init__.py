"""
schematic-graph - Adjacency analysis for engine schematics

Finds the numbers and symbols in a character grid, links the ones that
touch (including diagonally), and reports part numbers and gear ratios.
"""

__version__ = "0.1.0"

from .api import analyze, analyze_file
from .graph import AdjacencyGraph, Entity, EntityKind, Gear, SchematicAnalysis

__all__ = [
    "analyze",  # Main entry point
    "analyze_file",
    "AdjacencyGraph",
    "Entity",
    "EntityKind",
    "Gear",
    "SchematicAnalysis",
]
