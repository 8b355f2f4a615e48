"""Reading and parsing Ruby sources."""

from .discovery import discover_files
from .models import SourceUnit
from .treesitter_parser import RubyParser, parse_source, ruby_language

__all__ = [
    "RubyParser",
    "SourceUnit",
    "discover_files",
    "parse_source",
    "ruby_language",
]
