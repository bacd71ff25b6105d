"""src/purepath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from purepath.shared.path_syntax import PathSyntax
from purepath.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT

    def __init__(self, args: ArgsT) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args

    @property
    def syntax(self) -> PathSyntax:
        return self.args.syntax

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command and display its outcome."""
        pass
