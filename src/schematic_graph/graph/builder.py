"""Adjacency graph construction from schematic rows."""

from typing import Optional, Sequence

from ..exceptions import ErrorCode, GraphError
from ..logging_config import get_logger
from .extractor import extract_entities
from .models import AdjacencyGraph, Entity

logger = get_logger(__name__)


class _AdjacencyBuilder:
    """Accumulates symmetric edges for a single build call."""

    def __init__(self) -> None:
        self.adjacency: dict[Entity, set[Entity]] = {}
        self.edge_count = 0

    def add(self, entity: Entity) -> None:
        self.adjacency.setdefault(entity, set())

    def connect(self, a: Entity, b: Entity) -> None:
        """Record an undirected edge a <-> b."""
        if a == b:
            return
        a_neighbors = self.adjacency.setdefault(a, set())
        b_neighbors = self.adjacency.setdefault(b, set())
        if b not in a_neighbors:
            self.edge_count += 1
        a_neighbors.add(b)
        b_neighbors.add(a)

    def link_row(self, entities: list[Entity]) -> None:
        """Same-row pass: entities are column-sorted, so only successors can touch."""
        for entity in entities:
            self.add(entity)
        for left, right in zip(entities, entities[1:]):
            if left.is_adjacent_to(right):
                self.connect(left, right)

    def link_rows(self, current: list[Entity], above: list[Entity]) -> None:
        """Cross-row pass: every entity of ``current`` against the row above."""
        for entity in current:
            for other in above:
                if entity.is_adjacent_to(other):
                    self.connect(entity, other)


def build_adjacency_graph(rows: Sequence[str], validate: bool = True) -> AdjacencyGraph:
    """Build the adjacency graph for a whole schematic.

    Each row is compared with itself and with the row directly above it;
    entities never span rows, so rows further apart cannot touch.

    Args:
        rows: Schematic lines, top to bottom
        validate: Verify the finished mapping is symmetric and loop-free

    Returns:
        AdjacencyGraph keyed by every extracted entity

    Raises:
        GraphError: If validation is enabled and the mapping is inconsistent
    """
    builder = _AdjacencyBuilder()
    previous: Optional[list[Entity]] = None

    for y, line in enumerate(rows):
        current = extract_entities(line, y)
        builder.link_row(current)
        if previous:
            builder.link_rows(current, previous)
        previous = current

    graph = AdjacencyGraph(
        adjacency=builder.adjacency,
        row_count=len(rows),
        edge_count=builder.edge_count,
    )
    logger.debug(
        "Built adjacency graph: %d rows, %d entities, %d edges",
        graph.row_count,
        len(graph),
        graph.edge_count,
    )

    if validate:
        verify_symmetry(graph)
    return graph


def verify_symmetry(graph: AdjacencyGraph) -> None:
    """Check that every edge is recorded in both directions and none is a loop.

    Raises:
        GraphError: SC300 for a one-way edge, SC301 for a self-loop
    """
    for entity, neighbors in graph.adjacency.items():
        for neighbor in neighbors:
            if neighbor == entity:
                raise GraphError(
                    message=f"Entity is adjacent to itself: {entity}",
                    code=ErrorCode.SC301,
                    context={"entity": repr(entity)},
                    recoverable=False,
                )
            if entity not in graph.adjacency.get(neighbor, ()):
                raise GraphError(
                    message=f"One-way adjacency from {entity} to {neighbor}",
                    code=ErrorCode.SC300,
                    context={"entity": repr(entity), "neighbor": repr(neighbor)},
                    recoverable=False,
                )
