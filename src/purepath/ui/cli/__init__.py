"""Command line interface package."""

from purepath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
