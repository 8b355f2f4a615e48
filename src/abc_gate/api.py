"""Public API for abc-gate.

Example:
    >>> from abc_gate import analyze
    >>> violations = analyze(["lib/harness.rb"], max_complexity=10)
    >>> for v in violations:
    ...     print(v.columns)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional

from .checks import AbcCheck, Violation
from .config import DEFAULT_MAX_COMPLEXITY


def analyze(
    files: Sequence[str | Path],
    max_complexity: float = DEFAULT_MAX_COMPLEXITY,
    *,
    exclusions: Iterable[str] = (),
    parallel: bool = False,
    workers: Optional[int] = None,
) -> list[Violation]:
    """Check Ruby files for methods above an ABC complexity threshold.

    Args:
        files: Files to check; order only affects tie-breaking
        max_complexity: Methods scoring strictly above this are reported
        exclusions: Methods to skip, as ``Scope#method`` or ``Scope.method``
        parallel: Check files on a thread pool
        workers: Pool size when parallel (default: CPU count, max 8)

    Returns:
        ComplexityViolation and SyntaxViolation records, highest score
        first, syntax violations last
    """
    check = AbcCheck(
        files,
        max_complexity=max_complexity,
        exclusions=exclusions,
        parallel=parallel,
        workers=workers,
    )
    return check.violations()
