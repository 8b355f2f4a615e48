"""
abc-gate - ABC complexity gate for Ruby

Parses Ruby sources with tree-sitter, measures the Assignment/Branch/Condition
complexity of every method, and reports the methods that exceed a maximum.
"""

__version__ = "0.1.0"

from .api import analyze
from .checks import AbcCheck, ComplexityViolation, SyntaxViolation, Violation
from .metrics import AbcCounts, MethodUnit

__all__ = [
    "analyze",  # Main entry point
    "AbcCheck",
    "AbcCounts",
    "ComplexityViolation",
    "MethodUnit",
    "SyntaxViolation",
    "Violation",
]
