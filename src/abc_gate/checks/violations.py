"""Violation records produced by the ABC check.

A Violation is either a ComplexityViolation (a method scored above the
threshold) or a SyntaxViolation (the file could not be parsed). Consumers
handle both shapes explicitly; see ``sort_key`` for the pattern.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from ..metrics.abc import AbcCounts


@dataclass(frozen=True)
class ComplexityViolation:
    """A method whose ABC score is strictly above the threshold.

    Attributes:
        file: Path as supplied by the caller
        qualified_name: e.g. ``"Harness > complex_method"``
        position: 1-based line of the method definition
        score: ABC magnitude
        counts: The assignment/branch/condition triple behind the score
    """

    file: str
    qualified_name: str
    position: int
    score: float
    counts: AbcCounts = field(default_factory=AbcCounts)

    description = "Methods exceeded maximum allowed ABC complexity"

    @property
    def columns(self) -> tuple[str, str, int, float]:
        return (self.file, self.qualified_name, self.position, self.score)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "complexity",
            "file": self.file,
            "qualified_name": self.qualified_name,
            "position": self.position,
            "score": self.score,
            "assignments": self.counts.assignments,
            "branches": self.counts.branches,
            "conditions": self.counts.conditions,
            "description": self.description,
        }


@dataclass(frozen=True)
class SyntaxViolation:
    """A file that could not be parsed.

    Attributes:
        file: Path as supplied by the caller
        message: Parser's description of the problem
    """

    file: str
    message: str

    description = "Files contained invalid syntax"

    @property
    def columns(self) -> tuple[str]:
        return (self.file,)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "syntax",
            "file": self.file,
            "message": self.message,
            "description": self.description,
        }


Violation = Union[ComplexityViolation, SyntaxViolation]


def sort_key(violation: Violation) -> tuple[int, float]:
    """Order complexity violations by descending score, syntax violations last.

    Use with a stable sort so equal keys keep discovery order.
    """
    if isinstance(violation, ComplexityViolation):
        return (0, -violation.score)
    if isinstance(violation, SyntaxViolation):
        return (1, 0.0)
    raise TypeError(f"Unknown violation type: {type(violation).__name__}")
