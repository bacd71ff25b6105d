"""src/purepath/ui/cli/display/result.py
What: Render the outcome of path edits and configuration writes.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape

from purepath.ui.cli.models import EditResult


@final
class ResultDisplay:
    """Handles edit result display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = Console()

    def show_result(self, result: EditResult, quiet: bool = False) -> None:
        """Display an edit result.

        The edited path is printed even when ``quiet`` is set so the command
        stays usable in shell pipelines.

        Args:
            result: Result to display.
            quiet: Whether to suppress everything but the resulting path.
        """
        if result.success:
            if quiet:
                self.console.print(
                    result.target_path, markup=False, highlight=False, soft_wrap=True
                )
                return
            self.console.print(
                f"[green]{escape(result.source_path)}[/green] → "
                f"[bold green]{escape(result.target_path or '')}[/bold green]"
            )
            return

        self.console.print(
            f"[red]Failed {escape(result.operation or 'edit')} on "
            f"{escape(result.source_path)}: {escape(result.error_message or '')}[/red]"
        )

    def show_config_saved(self, destination: Path, quiet: bool = False) -> None:
        """Display where the configuration was written."""

        if quiet:
            self.console.print(str(destination), markup=False, highlight=False, soft_wrap=True)
            return
        self.console.print(
            f"Configuration written to [bold green]{escape(str(destination))}[/bold green]"
        )
