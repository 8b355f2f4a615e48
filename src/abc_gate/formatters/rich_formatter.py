"""Rich terminal formatter for abc-gate."""

import io
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..checks import ComplexityViolation, SyntaxViolation, Violation
from .base import BaseFormatter, ReportContext


def _score_label(score: float, max_complexity: float) -> str:
    if score >= max_complexity * 2:
        return f"[red bold]{score:.2f}[/red bold]"
    elif score >= max_complexity * 1.5:
        return f"[red]{score:.2f}[/red]"
    else:
        return f"[yellow]{score:.2f}[/yellow]"


class RichFormatter(BaseFormatter):
    """Rich terminal output: one table per violation kind and a summary line."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, violations: List[Violation], context: ReportContext) -> None:
        self._print(self.console, violations, context)

    def format(self, violations: List[Violation], context: ReportContext) -> str:
        console = Console(record=True, width=120, color_system=None, file=io.StringIO())
        self._print(console, violations, context)
        return console.export_text()

    def _print(self, console: Console, violations: List[Violation], context: ReportContext) -> None:
        complexity = [v for v in violations if isinstance(v, ComplexityViolation)]
        syntax = [v for v in violations if isinstance(v, SyntaxViolation)]
        if len(complexity) + len(syntax) != len(violations):
            raise TypeError("Unknown violation type in report")

        if complexity:
            table = Table(
                title=f"{ComplexityViolation.description} ({context.max_complexity:g})",
                title_justify="left",
            )
            table.add_column("File", style="blue")
            table.add_column("Method")
            table.add_column("Line", justify="right")
            table.add_column("ABC", justify="right")
            table.add_column("<A, B, C>", justify="right", style="dim")
            for v in complexity:
                table.add_row(
                    escape(v.file),
                    escape(v.qualified_name),
                    str(v.position),
                    _score_label(v.score, context.max_complexity),
                    str(v.counts),
                )
            console.print(table)

        if syntax:
            table = Table(title=SyntaxViolation.description, title_justify="left")
            table.add_column("File", style="blue")
            table.add_column("Problem", style="red")
            for v in syntax:
                table.add_row(escape(v.file), escape(v.message))
            console.print(table)

        if violations:
            console.print(
                f"[red bold]{len(violations)} violation(s)[/red bold] "
                f"in {context.files_checked} file(s) checked"
            )
        else:
            console.print(
                f"[green]No violations[/green] in {context.files_checked} file(s) checked"
            )
