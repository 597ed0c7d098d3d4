"""Configuration loading and management for schematic-graph.

Configuration sources are merged in priority order:
    1. Defaults (defined in SchematicConfig)
    2. Global config (~/.schematic-graph.toml)
    3. Project config (./schematic-graph.toml)
    4. Explicit config file
    5. Environment variables (SCHEMATIC_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, output_format="json")
    >>> config.verbosity
    'verbose'
    >>> config.output_format
    'json'
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import InvalidConfigError, SchematicGraphError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["rich", "json"]

_ENV_PREFIX = "SCHEMATIC_"


@dataclass(frozen=True)
class SchematicConfig:
    """Configuration for reading and reporting a schematic.

    The adjacency engine itself takes no parameters; these settings cover
    the line reader, validation and output.

    Attributes:
        encoding: Text encoding of schematic files
        strip_whitespace: Strip trailing whitespace from each row on read
        enable_validation: Verify the built graph is symmetric and loop-free
        verbosity: Logging verbosity level
        output_format: CLI output format
        log_file: Append log records to this file as well as stderr
    """

    encoding: str = "utf-8"
    strip_whitespace: bool = False
    enable_validation: bool = True
    verbosity: Verbosity = "normal"
    output_format: OutputFormat = "rich"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML and env values arrive untyped
        for name in ("strip_whitespace", "enable_validation"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
        for name in ("encoding", "verbosity", "output_format"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError("log_file must be a string")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding}")
        if self.verbosity not in get_args(Verbosity):
            raise ValueError(f"verbosity must be one of {get_args(Verbosity)}")
        if self.output_format not in get_args(OutputFormat):
            raise ValueError(f"output_format must be one of {get_args(OutputFormat)}")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> SchematicConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored, ``verbose``/``quiet`` map to ``verbosity``

    Returns:
        Validated SchematicConfig instance

    Raises:
        SchematicGraphError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".schematic-graph.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "schematic-graph.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise SchematicGraphError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    unknown = set(merged) - set(SchematicConfig.__dataclass_fields__)
    if unknown:
        key = sorted(unknown)[0]
        raise InvalidConfigError(key, merged[key], "unknown configuration key")

    try:
        return SchematicConfig(**merged)
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SCHEMATIC_* environment variables.

    Supported environment variables:
        SCHEMATIC_ENCODING: str
        SCHEMATIC_STRIP_WHITESPACE: bool (true/false/1/0)
        SCHEMATIC_ENABLE_VALIDATION: bool
        SCHEMATIC_VERBOSITY: quiet/normal/verbose
        SCHEMATIC_OUTPUT_FORMAT: rich/json
        SCHEMATIC_LOG_FILE: path
    """
    type_hints = get_type_hints(SchematicConfig)
    result: dict[str, Any] = {}

    for field_name in SchematicConfig.__dataclass_fields__:
        env_key = f"{_ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        if type_hints[field_name] is bool:
            lower = env_value.lower()
            if lower in ("true", "1", "yes", "on"):
                result[field_name] = True
            elif lower in ("false", "0", "no", "off"):
                result[field_name] = False
            else:
                raise InvalidConfigError(env_key, env_value, "expected true/false")
        else:
            result[field_name] = env_value

    return result


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, accepting either top-level keys or a [schematic] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise SchematicGraphError(f"Invalid config file '{path}': {e}")
    return data.get("schematic", data)
