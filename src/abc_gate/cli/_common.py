"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import GateConfig, load_config

# Reports go to stdout; diagnostics go here
console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    max_complexity: Optional[float] = None,
    globs: Optional[List[str]] = None,
    exclusions: Optional[List[str]] = None,
    output_format: Optional[str] = None,
    parallel: Optional[bool] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> GateConfig:
    """Build a GateConfig from CLI options layered over config files.

    ``--exclude`` adds to the configured exclusions; every other option
    replaces the configured value when given.
    """
    base = load_config(config_file=config)
    overrides = {
        "max_complexity": max_complexity,
        "file_globs": globs or None,
        "output_format": output_format,
        "parallel": parallel,
        "workers": workers,
        "verbose": verbose,
        "quiet": quiet,
    }
    if exclusions:
        overrides["exclusions"] = list(base.exclusions) + list(exclusions)
    return load_config(config_file=config, **overrides)
