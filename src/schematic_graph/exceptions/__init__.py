"""Exception hierarchy for schematic-graph."""

from .analysis import AnalysisError, FileAccessError
from .base import SchematicGraphError
from .config import ConfigurationError, InvalidConfigError
from .taxonomy import ErrorCode, GraphError, SchematicError

__all__ = [
    "SchematicGraphError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidConfigError",
    "ErrorCode",
    "SchematicError",
    "GraphError",
]
