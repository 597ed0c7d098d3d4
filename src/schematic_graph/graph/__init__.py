"""Schematic adjacency: entity extraction, graph construction, queries."""

from .builder import build_adjacency_graph, verify_symmetry
from .extractor import extract_entities
from .models import AdjacencyGraph, Entity, EntityKind, Gear, SchematicAnalysis
from .queries import gear_ratios, gears, part_numbers

__all__ = [
    "AdjacencyGraph",
    "Entity",
    "EntityKind",
    "Gear",
    "SchematicAnalysis",
    "build_adjacency_graph",
    "extract_entities",
    "gear_ratios",
    "gears",
    "part_numbers",
    "verify_symmetry",
]
