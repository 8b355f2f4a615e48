"""File discovery: expand paths and glob patterns into Ruby files."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional

from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)

RUBY_GLOB = "**/*.rb"

_GLOB_CHARS = frozenset("*?[")


def discover_files(
    paths: Sequence[str | Path] = (),
    globs: Iterable[str] = (),
    root: Optional[Path] = None,
) -> list[Path]:
    """Expand explicit paths and glob patterns into an ordered file list.

    Explicit paths come first, in the order given; directories expand to
    every ``*.rb`` file beneath them. Glob patterns are only used when no
    paths are given. Duplicates keep their first position.

    Args:
        paths: Files, directories or glob patterns
        globs: Fallback patterns, relative to root
        root: Base directory for relative patterns (default: the current
            directory, giving paths relative to it)

    Returns:
        Files in discovery order

    Raises:
        FileAccessError: If an explicit, non-pattern path does not exist
    """
    root = root or Path(".")
    found: list[Path] = []

    if paths:
        for raw in paths:
            found.extend(_expand(Path(raw), root))
    else:
        for pattern in globs:
            matches = sorted(p for p in root.glob(pattern) if p.is_file())
            logger.debug(f"{pattern}: {len(matches)} files")
            found.extend(matches)

    seen: set[Path] = set()
    unique: list[Path] = []
    for path in found:
        key = path.resolve()
        if key in seen:
            continue
        seen.add(key)
        unique.append(path)
    return unique


def _expand(path: Path, root: Path) -> list[Path]:
    if _GLOB_CHARS.intersection(str(path)):
        if path.is_absolute():
            anchor = Path(path.anchor)
            pattern = str(path.relative_to(anchor))
        else:
            anchor, pattern = root, str(path)
        return sorted(p for p in anchor.glob(pattern) if p.is_file())
    if path.is_dir():
        return sorted(p for p in path.glob(RUBY_GLOB) if p.is_file())
    if path.is_file():
        return [path]
    raise FileAccessError(path, "No such file or directory")
