"""Error taxonomy with error codes and recovery hints.

Error Code Convention:
    SC3xx - Graph errors (adjacency construction and validation)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Structured error codes for observability and debugging."""

    # Graph errors (SC3xx)
    SC300 = "SC300"  # Adjacency not symmetric
    SC301 = "SC301"  # Self-loop in adjacency


@dataclass
class SchematicError(Exception):
    """Base exception with structured context for logging.

    Attributes:
        message: Human-readable error description
        code: Structured error code for categorization
        context: Additional context (entity, neighbour)
        recoverable: Whether the error can be recovered from
        recovery_hint: Suggested fix for the user
    """

    message: str
    code: ErrorCode
    context: dict[str, Any] = field(default_factory=dict)
    recoverable: bool = True
    recovery_hint: str | None = None

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __post_init__(self) -> None:
        # Initialize Exception with the string representation
        super().__init__(str(self))

    def to_json(self) -> dict[str, Any]:
        """Structured logging format."""
        return {
            "error_code": self.code.value,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
            "recovery_hint": self.recovery_hint,
        }


class GraphError(SchematicError):
    """Errors during adjacency graph construction and validation (SC3xx)."""

    pass
