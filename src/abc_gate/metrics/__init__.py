"""Method extraction and ABC measurement."""

from .abc import AbcCounts, abc_score, measure
from .extractor import SCOPE_SEPARATOR, MethodUnit, extract_methods

__all__ = [
    "AbcCounts",
    "MethodUnit",
    "SCOPE_SEPARATOR",
    "abc_score",
    "extract_methods",
    "measure",
]
