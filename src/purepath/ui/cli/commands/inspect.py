"""src/purepath/ui/cli/commands/inspect.py
What: Decompose path strings and display their derived attributes.
Why: Give the CLI a read-only view over PurePath accessors.
"""

from __future__ import annotations

from typing import final, override

from purepath.features.path import PurePath
from purepath.platform.logging import logger
from purepath.ui.cli.args.options import InspectArgs
from purepath.ui.cli.display.inspect import InspectDisplay
from purepath.ui.cli.models import PathReport

from .executor import CommandExecutor


@final
class InspectCommand(CommandExecutor[InspectArgs, list[PathReport]]):
    """Handle the ``inspect`` subcommand."""

    display: InspectDisplay

    def __init__(self, args: InspectArgs) -> None:
        super().__init__(args)
        self.display = InspectDisplay()

    @override
    def execute(self) -> list[PathReport]:
        reports: list[PathReport] = []
        for raw_path in self.args.paths:
            path = PurePath(raw_path, syntax=self.syntax)
            logger.debug(
                "Inspecting %s",
                path,
                extra={"path_event": "path.inspect", "source_path": str(path)},
            )
            reports.append(PathReport.from_path(path))

        self.display.show_reports(reports, quiet=self.args.quiet)
        return reports
