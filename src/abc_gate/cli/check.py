"""The check command: run the ABC gate and report violations."""

from pathlib import Path
from typing import List, Optional

import typer

from ..api import analyze
from ..exceptions import AbcGateError, FileAccessError
from ..formatters import ReportContext, get_formatter
from ..logging_config import get_logger, setup_logging
from ..scanning import discover_files
from . import app
from ._common import console, resolve_config

logger = get_logger(__name__)

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_USAGE = 2


@app.command()
def check(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Ruby files, directories or glob patterns (default: configured globs)",
    ),
    max_complexity: Optional[float] = typer.Option(
        None,
        "--max",
        "-m",
        help="Maximum allowed ABC complexity per method (default: 15)",
    ),
    glob: Optional[List[str]] = typer.Option(
        None,
        "--glob",
        "-g",
        help="Glob pattern for files to check when no paths are given (repeatable)",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Method to skip, e.g. 'Harness#method' or 'Harness.class_method' (repeatable)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich, json, quiet, github",
    ),
    parallel: Optional[bool] = typer.Option(
        None,
        "--parallel/--no-parallel",
        help="Check files on a thread pool",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Worker threads when parallel (default: CPU count, max 8)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to FILE"),
) -> None:
    """Report Ruby methods whose ABC complexity exceeds the maximum.

    Exits 1 when any violation is found, 2 on usage or configuration errors.
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        cfg = resolve_config(
            config=config,
            max_complexity=max_complexity,
            globs=glob,
            exclusions=exclude,
            output_format=output_format,
            parallel=parallel,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )
        files = discover_files(paths or (), cfg.file_globs)
    except FileAccessError as e:
        console.print(f"[red]Error:[/red] {e.filepath}: {e.reason}")
        raise typer.Exit(EXIT_USAGE)
    except AbcGateError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_USAGE)

    logger.debug(f"Checking {len(files)} file(s) against max {cfg.max_complexity:g}")

    violations = analyze(
        files,
        cfg.max_complexity,
        exclusions=cfg.exclusions,
        parallel=cfg.parallel,
        workers=cfg.workers,
    )

    formatter = get_formatter(cfg.output_format)
    formatter.render(violations, ReportContext(len(files), cfg.max_complexity))

    raise typer.Exit(EXIT_VIOLATIONS if violations else EXIT_CLEAN)
