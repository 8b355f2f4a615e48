"""Analysis-related exceptions: file access and parsing."""

from pathlib import Path
from typing import Optional

from .base import AbcGateError


class AnalysisError(AbcGateError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when source text is not valid Ruby.

    ``reason`` is a free-text description of the first problem the parser
    found; ``line`` and ``column`` are 1-based when known.
    """

    def __init__(self, reason: str, line: Optional[int] = None, column: Optional[int] = None):
        details = {"reason": reason}
        if line is not None:
            details["line"] = str(line)
        if column is not None:
            details["column"] = str(column)
        super().__init__("Failed to parse Ruby source", details=details)
        self.reason = reason
        self.line = line
        self.column = column
