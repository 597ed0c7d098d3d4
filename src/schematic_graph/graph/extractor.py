"""Entity extraction from a single schematic row."""

import re

from .models import Entity, EntityKind

# A run of ASCII digits, or any single character that is not background
_TOKEN_RE = re.compile(r"(?P<number>[0-9]+)|(?P<symbol>[^.0-9])")


def extract_entities(line: str, row: int) -> list[Entity]:
    """Scan one row left to right and return its numbers and symbols.

    A maximal digit run becomes one NUMBER spanning the run; every other
    character except ``.`` becomes a one-column SYMBOL. Digits are matched
    as ASCII only so ``int()`` never sees a non-decimal run.
    """
    if row < 0:
        raise ValueError(f"row must be non-negative, got {row}")

    entities: list[Entity] = []
    for match in _TOKEN_RE.finditer(line):
        start, end = match.span()
        if match.lastgroup == "number":
            entities.append(Entity(EntityKind.NUMBER, int(match.group()), row, start, end - 1))
        else:
            entities.append(Entity.symbol(match.group(), row, start))
    return entities
