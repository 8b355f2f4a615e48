"""Checks that turn Ruby sources into violations."""

from .abc_check import AbcCheck
from .violations import ComplexityViolation, SyntaxViolation, Violation, sort_key

__all__ = [
    "AbcCheck",
    "ComplexityViolation",
    "SyntaxViolation",
    "Violation",
    "sort_key",
]
