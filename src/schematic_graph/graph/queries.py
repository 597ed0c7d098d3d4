"""Number/symbol classification queries over a built adjacency graph."""

from .models import AdjacencyGraph, Gear


def part_numbers(graph: AdjacencyGraph) -> list[int]:
    """Values of numbers touching at least one symbol, in grid order.

    Numbers are distinguished by position, so equal values at different
    places are each reported.
    """
    return [
        number.value
        for number in graph.numbers()
        if any(neighbor.is_symbol for neighbor in graph.adjacency[number])
    ]


def gears(graph: AdjacencyGraph) -> list[Gear]:
    """Symbols of any character that touch exactly two numbers."""
    result: list[Gear] = []
    for symbol in graph.symbols():
        numbers = sorted(
            (n for n in graph.adjacency[symbol] if n.is_number),
            key=lambda n: n.sort_key(),
        )
        if len(numbers) == 2:
            result.append(Gear(symbol=symbol, numbers=(numbers[0], numbers[1])))
    return result


def gear_ratios(graph: AdjacencyGraph) -> list[int]:
    """Product of the two numbers around each gear, in grid order."""
    return [gear.ratio for gear in gears(graph)]
