"""Display helpers for CLI output."""

from purepath.ui.cli.display.inspect import InspectDisplay
from purepath.ui.cli.display.result import ResultDisplay

__all__ = ["InspectDisplay", "ResultDisplay"]
