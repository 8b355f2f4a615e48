"""Base formatter interface for abc-gate output rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..checks import Violation


@dataclass(frozen=True)
class ReportContext:
    """What was checked, for report headers and summaries."""

    files_checked: int
    max_complexity: float


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, violations: List[Violation], context: ReportContext) -> None:
        """Print the report to stdout."""
        output = self.format(violations, context)
        if output:
            print(output)

    @abstractmethod
    def format(self, violations: List[Violation], context: ReportContext) -> str:
        """Return formatted string representation of violations."""
