"""Rich terminal formatter for filestats."""

from rich.console import Console
from rich.table import Table

from ..api import ScanResult
from .base import BaseFormatter


class RichFormatter(BaseFormatter):
    """Rich table with one row per file type and a totals row."""

    def build_table(self, result: ScanResult) -> Table:
        table = Table(
            title=f"File statistics for {result.root}",
            show_footer=bool(result.records),
        )
        totals = [0, 0, 0, 0, 0]
        for record in result.records.values():
            for i, value in enumerate(
                (record.count, record.size, record.lines, record.non_empty_lines, record.comment_lines)
            ):
                totals[i] += value

        table.add_column("Type", footer="[bold]Total[/bold]", style="cyan")
        for header, total in zip(("Files", "Size", "Lines", "Non-empty", "Comments"), totals):
            table.add_column(header, footer=str(total), justify="right")

        for extension, record in result.records.items():
            table.add_row(
                extension or "[dim](none)[/dim]",
                str(record.count),
                str(record.size),
                str(record.lines),
                str(record.non_empty_lines),
                str(record.comment_lines),
            )
        return table

    def render(self, result: ScanResult) -> None:
        console = Console()
        console.print(self.build_table(result))
        if result.files_failed:
            console.print(f"[yellow]{len(result.files_failed)} file(s) skipped (unreadable)[/yellow]")

    def format(self, result: ScanResult) -> str:
        console = Console(width=100, force_terminal=False)
        with console.capture() as capture:
            console.print(self.build_table(result))
        return capture.get()
