"""Quiet formatter: file paths only."""

from typing import List

from ..checks import Violation
from .base import BaseFormatter, ReportContext


class QuietFormatter(BaseFormatter):
    """Render each offending file once, one per line."""

    def format(self, violations: List[Violation], context: ReportContext) -> str:
        files = dict.fromkeys(v.file for v in violations)
        return "\n".join(files)
