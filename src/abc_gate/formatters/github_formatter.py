"""GitHub Actions formatter: workflow command annotations."""

from typing import List

from ..checks import ComplexityViolation, SyntaxViolation, Violation
from .base import BaseFormatter, ReportContext


def _escape(value: str) -> str:
    """Escape a value for a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape(value).replace(":", "%3A").replace(",", "%2C")


class GithubFormatter(BaseFormatter):
    """Output ``::error`` annotations, one per violation."""

    def format(self, violations: List[Violation], context: ReportContext) -> str:
        lines: list[str] = []
        for v in violations:
            if isinstance(v, ComplexityViolation):
                msg = (
                    f"{v.qualified_name} has ABC complexity {v.score:.2f} "
                    f"(max {context.max_complexity:g})"
                )
                lines.append(
                    f"::error file={_escape_property(v.file)},line={v.position}::{_escape(msg)}"
                )
            elif isinstance(v, SyntaxViolation):
                msg = f"{v.description}: {v.message}"
                lines.append(f"::error file={_escape_property(v.file)}::{_escape(msg)}")
            else:
                raise TypeError(f"Unknown violation type: {type(v).__name__}")
        return "\n".join(lines)
