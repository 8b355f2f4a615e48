"""Configuration loading and management for abc-gate.

Configuration sources are merged in priority order:
    1. Defaults (defined in GateConfig)
    2. Global config (~/.abc-gate.toml)
    3. Project config (./abc-gate.toml)
    4. Explicit config file
    5. Environment variables (ABC_GATE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(max_complexity=10)
    >>> config.max_complexity
    10.0
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

# Cane's default abc_max
DEFAULT_MAX_COMPLEXITY = 15.0

# Cane's default abc_glob is {app,lib,spec}/**/*.rb; pathlib has no braces
DEFAULT_FILE_GLOBS = ("app/**/*.rb", "lib/**/*.rb", "spec/**/*.rb")

OUTPUT_FORMATS = ("rich", "json", "quiet", "github")


@dataclass(frozen=True)
class GateConfig:
    """Settings for one ABC gate run.

    Attributes:
        max_complexity: Methods scoring strictly above this are violations
        file_globs: Patterns expanded from the working directory when no
            paths are given on the command line
        exclusions: Methods to skip, as ``Scope#method`` (instance) or
            ``Scope.method`` (singleton)
        parallel: Fan files out to a thread pool
        workers: Pool size (None = min(cpu_count, 8))
        output_format: One of OUTPUT_FORMATS
        verbosity: Logging verbosity level
    """

    max_complexity: float = DEFAULT_MAX_COMPLEXITY
    file_globs: list[str] = field(default_factory=lambda: list(DEFAULT_FILE_GLOBS))
    exclusions: list[str] = field(default_factory=list)
    parallel: bool = False
    workers: Optional[int] = None
    output_format: str = "rich"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML integers arrive as int
        object.__setattr__(self, "max_complexity", float(self.max_complexity))

        if self.max_complexity < 0:
            raise InvalidConfigError(
                "max_complexity", self.max_complexity, "must be non-negative"
            )
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"choose from: {', '.join(OUTPUT_FORMATS)}",
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "choose from: quiet, normal, verbose"
            )
        if not self.file_globs:
            raise InvalidConfigError("file_globs", self.file_globs, "must not be empty")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> GateConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask files.

    Returns:
        Validated GateConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".abc-gate.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "abc-gate.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return GateConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from ABC_GATE_* environment variables.

    Supported environment variables:
        ABC_GATE_MAX_COMPLEXITY: float
        ABC_GATE_PARALLEL: bool (true/false/1/0)
        ABC_GATE_WORKERS: int
        ABC_GATE_OUTPUT_FORMAT: rich/json/quiet/github
        ABC_GATE_VERBOSITY: quiet/normal/verbose

    List fields (file_globs, exclusions) are only read from TOML.
    """
    type_hints = get_type_hints(GateConfig)

    result: dict[str, Any] = {}

    for field_name in GateConfig.__dataclass_fields__:
        env_key = f"ABC_GATE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML config file.

    Settings may sit at the top level or under an ``[abc]`` table.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("abc")
    if isinstance(section, dict):
        return dict(section)
    return data
