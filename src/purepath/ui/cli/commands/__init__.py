"""Command execution package for CLI."""

from purepath.ui.cli.commands.executor import CommandExecutor
from purepath.ui.cli.commands.config import ConfigCommand
from purepath.ui.cli.commands.edit import EditCommand
from purepath.ui.cli.commands.inspect import InspectCommand

__all__ = ["CommandExecutor", "ConfigCommand", "EditCommand", "InspectCommand"]
