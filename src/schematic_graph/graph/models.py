"""Data models for schematic adjacency analysis.

Grid levels:
  Level 1: Cells (row, column) - positions in the character grid
  Level 2: Entities (numbers, symbols) - tokens occupying one or more cells
  Level 3: Relationships (adjacency) - undirected graph edges between entities
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

Cell = tuple[int, int]  # (row, col)


class EntityKind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"


# ── Level 2: Entities ──────────────────────────────────────────────


@dataclass(frozen=True)
class Entity:
    """A number or symbol token occupying a horizontal span of one row.

    Entities are value objects: two entities are the same node when kind,
    value, row and span all match. Columns are inclusive and 0-indexed.
    """

    kind: EntityKind
    value: Union[int, str]  # int for NUMBER, one character for SYMBOL
    row: int
    min_col: int
    max_col: int

    def __post_init__(self) -> None:
        if self.row < 0:
            raise ValueError(f"row must be non-negative, got {self.row}")
        if not 0 <= self.min_col <= self.max_col:
            raise ValueError(
                f"invalid column span [{self.min_col}, {self.max_col}]"
            )
        if self.kind is EntityKind.SYMBOL:
            if self.width != 1 or not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"symbol must be a single character in one column: {self!r}")
        else:
            if not isinstance(self.value, int) or self.value < 0:
                raise ValueError(f"number value must be a non-negative int: {self!r}")
            # Leading zeros make the span wider than the rendered value
            if len(str(self.value)) > self.width:
                raise ValueError(f"number {self.value} does not fit its span: {self!r}")

    @classmethod
    def number(cls, value: int, row: int, min_col: int) -> "Entity":
        """Number whose span is derived from its decimal digit count."""
        return cls(EntityKind.NUMBER, value, row, min_col, min_col + len(str(value)) - 1)

    @classmethod
    def symbol(cls, char: str, row: int, col: int) -> "Entity":
        return cls(EntityKind.SYMBOL, char, row, col, col)

    @property
    def is_number(self) -> bool:
        return self.kind is EntityKind.NUMBER

    @property
    def is_symbol(self) -> bool:
        return self.kind is EntityKind.SYMBOL

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    def cells(self) -> set[Cell]:
        """Cells this entity actually covers."""
        return {(self.row, col) for col in range(self.min_col, self.max_col + 1)}

    def halo(self) -> set[Cell]:
        """Cells within one step of this entity, including its own.

        Rows span [row-1, row+1] and columns [min_col-1, max_col+1], with the
        lower bounds clamped at 0 so the grid edge shrinks the halo.
        """
        min_row = max(self.row - 1, 0)
        min_col = max(self.min_col - 1, 0)
        return {
            (row, col)
            for row in range(min_row, self.row + 2)
            for col in range(min_col, self.max_col + 2)
        }

    def is_adjacent_to(self, other: "Entity") -> bool:
        """True if any cell of ``other`` falls inside this entity's halo."""
        return not self.halo().isdisjoint(other.cells())

    def sort_key(self) -> tuple[int, int]:
        return (self.row, self.min_col)


# ── Level 3: Relationships (the adjacency graph) ───────────────────


@dataclass
class AdjacencyGraph:
    """Undirected adjacency between the entities of one schematic.

    ``adjacency[A]`` contains B iff ``adjacency[B]`` contains A. Every
    extracted entity is a key, isolated ones map to an empty set.
    """

    adjacency: dict[Entity, set[Entity]] = field(default_factory=dict)
    row_count: int = 0
    edge_count: int = 0

    def __contains__(self, entity: Entity) -> bool:
        return entity in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def neighbors(self, entity: Entity) -> frozenset[Entity]:
        return frozenset(self.adjacency.get(entity, ()))

    def entities(self) -> list[Entity]:
        """All entities ordered by row, then column."""
        return sorted(self.adjacency, key=Entity.sort_key)

    def numbers(self) -> list[Entity]:
        return [e for e in self.entities() if e.is_number]

    def symbols(self) -> list[Entity]:
        return [e for e in self.entities() if e.is_symbol]


@dataclass
class Gear:
    """A symbol touching exactly two numbers."""

    symbol: Entity
    numbers: tuple[Entity, Entity]

    @property
    def ratio(self) -> int:
        return self.numbers[0].value * self.numbers[1].value


# ── Full result ────────────────────────────────────────────────────


@dataclass
class SchematicAnalysis:
    """Complete analysis result for one schematic."""

    graph: AdjacencyGraph = field(default_factory=AdjacencyGraph)
    part_numbers: list[int] = field(default_factory=list)
    gears: list[Gear] = field(default_factory=list)

    @property
    def gear_ratios(self) -> list[int]:
        return [gear.ratio for gear in self.gears]

    @property
    def part_number_sum(self) -> int:
        return sum(self.part_numbers)

    @property
    def gear_ratio_sum(self) -> int:
        return sum(self.gear_ratios)
