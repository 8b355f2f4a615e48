"""AbcCheck: reports methods whose ABC complexity exceeds a maximum.

Each file goes through parse → extract → measure → collect on its own, so
files can be fanned out to a thread pool. Results are merged in the order
the files were given and sorted once at the end.

Usage:
    check = AbcCheck(["lib/harness.rb"], max_complexity=10)
    for violation in check.violations():
        ...
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_MAX_COMPLEXITY
from ..exceptions import FileAccessError, ParsingError
from ..logging_config import get_logger
from ..metrics.abc import measure
from ..metrics.extractor import extract_methods
from ..scanning.models import SourceUnit
from ..scanning.treesitter_parser import parse_source
from .violations import ComplexityViolation, SyntaxViolation, Violation, sort_key

logger = get_logger(__name__)

# Default worker count: use CPU count, capped at 8
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)


class AbcCheck:
    """Runs the ABC complexity check over a list of files.

    Attributes:
        files: Files to check, in caller order
        max_complexity: Methods scoring strictly above this are reported
        exclusions: Exclusion keys (``Scope#method`` / ``Scope.method``)
            of methods to skip
        parallel: Check files on a thread pool
        workers: Pool size when parallel
    """

    def __init__(
        self,
        files: Sequence[str | Path],
        max_complexity: float = DEFAULT_MAX_COMPLEXITY,
        exclusions: Iterable[str] = (),
        parallel: bool = False,
        workers: Optional[int] = None,
    ) -> None:
        self.files = list(files)
        self.max_complexity = max_complexity
        self.exclusions = frozenset(exclusions)
        self.parallel = parallel
        self.workers = workers or _DEFAULT_WORKERS

    def violations(self) -> list[Violation]:
        """Check every file and return violations, highest score first.

        Complexity violations with equal scores keep discovery order (files
        in the order given, methods in source order). Syntax violations
        follow all complexity violations.
        """
        if self.parallel and len(self.files) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                per_file = list(executor.map(self.check_file, self.files))
        else:
            per_file = [self.check_file(path) for path in self.files]

        merged = [violation for violations in per_file for violation in violations]
        return sorted(merged, key=sort_key)

    def check_file(self, path: str | Path) -> list[Violation]:
        """Read and check a single file. Unreadable files are skipped."""
        try:
            source = SourceUnit.read(path)
        except FileAccessError as e:
            logger.warning(f"Skipping {path}: {e.reason}")
            return []
        return self.check_source(source)

    def check_source(self, source: SourceUnit) -> list[Violation]:
        """Check one file's text. Violations are returned unsorted."""
        try:
            tree = parse_source(source.text)
        except ParsingError as e:
            logger.debug(f"{source.path}: {e.reason}")
            return [SyntaxViolation(file=source.path, message=e.reason)]

        violations: list[Violation] = []
        for method in extract_methods(tree):
            if method.exclusion_key in self.exclusions:
                logger.debug(f"{source.path}: excluded {method.exclusion_key}")
                continue

            counts = measure(method.node)
            score = counts.score
            logger.debug(
                f"{source.path}:{method.position} {method.qualified_name} {counts} = {score:.2f}"
            )
            if score > self.max_complexity:
                violations.append(
                    ComplexityViolation(
                        file=source.path,
                        qualified_name=method.qualified_name,
                        position=method.position,
                        score=score,
                        counts=counts,
                    )
                )
        return violations
