"""Data models for source files read from disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..exceptions import FileAccessError


@dataclass(frozen=True)
class SourceUnit:
    """A file path plus its raw text.

    Attributes:
        path: Path as supplied by the caller (reported verbatim)
        text: Decoded file contents
    """

    path: str
    text: str

    @classmethod
    def read(cls, path: str | Path) -> SourceUnit:
        """Read a file as UTF-8, replacing undecodable bytes.

        Raises:
            FileAccessError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FileAccessError(Path(path), f"OS error: {e}")
        return cls(path=str(path), text=text)
