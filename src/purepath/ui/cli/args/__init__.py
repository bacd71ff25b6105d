"""Command line argument handling package."""

from purepath.ui.cli.args.parser import ArgumentParser
from purepath.ui.cli.args.options import CLIArgs, ConfigArgs, EditArgs, InspectArgs

__all__ = ["ArgumentParser", "CLIArgs", "ConfigArgs", "EditArgs", "InspectArgs"]
