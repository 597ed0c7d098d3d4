"""Tests for graph/models.py: entity geometry and graph containers."""

import pytest

from schematic_graph.graph.models import (
    AdjacencyGraph,
    Entity,
    EntityKind,
    Gear,
    SchematicAnalysis,
)


class TestEntityConstruction:
    def test_number_span_from_digits(self):
        number = Entity.number(112, 1, 1)
        assert number.kind is EntityKind.NUMBER
        assert number.min_col == 1
        assert number.max_col == 3
        assert number.width == 3

    def test_symbol_single_column(self):
        symbol = Entity.symbol("*", 4, 3)
        assert symbol.is_symbol
        assert symbol.min_col == symbol.max_col == 3

    def test_value_equality(self):
        assert Entity.number(467, 0, 0) == Entity.number(467, 0, 0)
        assert hash(Entity.symbol("#", 3, 6)) == hash(Entity.symbol("#", 3, 6))

    def test_same_value_different_position_are_distinct(self):
        assert Entity.number(99, 0, 2) != Entity.number(99, 0, 6)

    def test_frozen(self):
        number = Entity.number(7, 0, 0)
        with pytest.raises(AttributeError):
            number.row = 1

    def test_negative_row_rejected(self):
        with pytest.raises(ValueError):
            Entity.symbol("*", -1, 0)

    def test_inverted_span_rejected(self):
        with pytest.raises(ValueError):
            Entity(EntityKind.NUMBER, 5, 0, 3, 2)

    def test_wide_symbol_rejected(self):
        with pytest.raises(ValueError):
            Entity(EntityKind.SYMBOL, "*", 0, 1, 2)

    def test_number_wider_than_span_rejected(self):
        with pytest.raises(ValueError):
            Entity(EntityKind.NUMBER, 1234, 0, 0, 1)

    def test_leading_zero_span_allowed(self):
        # "007" occupies three columns even though its value renders as "7"
        number = Entity(EntityKind.NUMBER, 7, 0, 0, 2)
        assert number.cells() == {(0, 0), (0, 1), (0, 2)}


class TestEntityGeometry:
    def test_number_halo_size(self):
        assert len(Entity.number(112, 1, 1).halo()) == 15

    def test_number_on_border_halo_size(self):
        halo = Entity.number(12, 0, 0).halo()
        assert len(halo) == 6
        assert all(row >= 0 and col >= 0 for row, col in halo)

    def test_symbol_halo_in_corner(self):
        assert Entity.symbol("*", 0, 0).halo() == {(0, 0), (0, 1), (1, 0), (1, 1)}

    def test_halo_contains_own_cells(self):
        number = Entity.number(4567, 3, 5)
        assert number.cells() <= number.halo()

    def test_adjacent_numbers_stacked(self):
        assert Entity.number(112, 1, 1).is_adjacent_to(Entity.number(345, 2, 1))

    def test_numbers_two_rows_apart_not_adjacent(self):
        assert not Entity.number(112, 1, 1).is_adjacent_to(Entity.number(112, 3, 1))

    def test_symbol_adjacent_to_number(self):
        assert Entity.symbol("#", 0, 0).is_adjacent_to(Entity.number(3, 0, 1))

    def test_symbol_adjacent_to_number_same_line(self):
        assert Entity.symbol("*", 4, 3).is_adjacent_to(Entity.number(617, 4, 0))
        assert Entity.symbol("*", 4, 2).is_adjacent_to(Entity.number(617, 4, 3))

    def test_diagonal_adjacency(self):
        assert Entity.symbol("$", 2, 4).is_adjacent_to(Entity.number(12, 1, 5))
        assert Entity.symbol("$", 2, 4).is_adjacent_to(Entity.number(12, 3, 2))

    def test_one_column_gap_not_adjacent(self):
        symbol = Entity.symbol("#", 0, 3)
        number = Entity.number(114, 0, 5)
        assert not symbol.is_adjacent_to(number)
        assert not number.is_adjacent_to(symbol)

    @pytest.mark.parametrize(
        "a,b",
        [
            (Entity.symbol("*", 1, 3), Entity.number(467, 0, 0)),
            (Entity.number(35, 2, 2), Entity.symbol("*", 1, 3)),
            (Entity.symbol("+", 5, 5), Entity.number(592, 6, 2)),
            (Entity.symbol("+", 5, 5), Entity.number(58, 5, 7)),
        ],
    )
    def test_adjacency_result_is_symmetric(self, a, b):
        assert a.is_adjacent_to(b) == b.is_adjacent_to(a)


class TestAdjacencyGraph:
    def test_empty_graph(self):
        graph = AdjacencyGraph()
        assert len(graph) == 0
        assert graph.entities() == []
        assert graph.edge_count == 0

    def test_neighbors_of_unknown_entity(self):
        assert AdjacencyGraph().neighbors(Entity.symbol("*", 0, 0)) == frozenset()

    def test_ordering_and_partition(self):
        star = Entity.symbol("*", 1, 3)
        first = Entity.number(467, 0, 0)
        second = Entity.number(35, 2, 2)
        graph = AdjacencyGraph(
            adjacency={second: {star}, star: {first, second}, first: {star}},
            row_count=3,
            edge_count=2,
        )
        assert graph.entities() == [first, star, second]
        assert graph.numbers() == [first, second]
        assert graph.symbols() == [star]
        assert first in graph


class TestResults:
    def test_gear_ratio(self):
        gear = Gear(
            symbol=Entity.symbol("*", 1, 3),
            numbers=(Entity.number(467, 0, 0), Entity.number(35, 2, 2)),
        )
        assert gear.ratio == 16345

    def test_analysis_sums(self):
        gear = Gear(
            symbol=Entity.symbol("*", 1, 3),
            numbers=(Entity.number(2, 0, 2), Entity.number(3, 2, 2)),
        )
        analysis = SchematicAnalysis(part_numbers=[2, 3, 10], gears=[gear])
        assert analysis.part_number_sum == 15
        assert analysis.gear_ratios == [6]
        assert analysis.gear_ratio_sum == 6

    def test_empty_analysis(self):
        analysis = SchematicAnalysis()
        assert analysis.part_number_sum == 0
        assert analysis.gear_ratio_sum == 0
