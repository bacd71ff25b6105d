"""src/purepath/ui/cli/display/inspect.py
What: Render decomposed path attributes as Rich tables.
Why: Keep console formatting out of the inspect command.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from purepath.ui.cli.models import PathReport


def _format_sequence(values: Sequence[str]) -> str:
    return escape("[" + ", ".join(repr(value) for value in values) + "]")


@final
class InspectDisplay:
    """Handles inspect output in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize inspect display."""
        self.console = Console()

    def build_table(self, report: PathReport) -> Table:
        """Build the attribute table for a single path.

        Args:
            report: Flattened attributes of the path.

        Returns:
            Table: Two-column table of attribute names and values.
        """
        table = Table(title=escape(report.path), show_header=True, header_style="bold cyan")
        table.add_column("Attribute", style="cyan", no_wrap=True)
        table.add_column("Value", style="white")

        table.add_row("root", escape(repr(report.root)))
        table.add_row("parts", _format_sequence(report.parts))
        table.add_row("name", escape(repr(report.name)))
        table.add_row("stem", escape(repr(report.stem)))
        table.add_row("suffix", escape(repr(report.suffix)))
        table.add_row("suffixes", _format_sequence(report.suffixes))
        table.add_row("parent", escape(report.parent))
        table.add_row("absolute", "yes" if report.is_absolute else "no")
        table.add_row("uri", escape(report.uri))
        return table

    def show_reports(self, reports: Sequence[PathReport], quiet: bool = False) -> None:
        """Display one table per path.

        Args:
            reports: Reports to render.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        for report in reports:
            self.console.print(self.build_table(report))
