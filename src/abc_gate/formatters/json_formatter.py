"""JSON formatter for abc-gate."""

import json
from typing import List

from ..checks import Violation
from .base import BaseFormatter, ReportContext


class JsonFormatter(BaseFormatter):
    """Render violations as a JSON document."""

    def format(self, violations: List[Violation], context: ReportContext) -> str:
        data = {
            "files_checked": context.files_checked,
            "max_complexity": context.max_complexity,
            "violations": [v.to_dict() for v in violations],
        }
        return json.dumps(data, indent=2)
