"""Exception hierarchy for abc-gate."""

from .analysis import AnalysisError, FileAccessError, ParsingError
from .base import AbcGateError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "AbcGateError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidConfigError",
]
