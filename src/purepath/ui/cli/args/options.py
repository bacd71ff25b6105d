"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from purepath.shared.path_syntax import PathSyntax


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    paths: list[str]
    syntax: PathSyntax
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand."""

    command: Literal["edit"]
    path: str
    syntax: PathSyntax
    verbose: bool
    quiet: bool
    join: list[str] = field(default_factory=list)
    relative_to: str | None = None
    name: str | None = None
    stem: str | None = None
    suffix: str | None = None
    suffixes: list[str] | None = None


@final
@dataclass(slots=True)
class ConfigArgs:
    """Command line arguments for the ``config`` subcommand."""

    command: Literal["config"]
    syntax: PathSyntax
    verbose: bool
    quiet: bool
    separator_style: str
    log_file: Path | None = None
    target: Path | None = None


CLIArgs = InspectArgs | EditArgs | ConfigArgs

__all__ = ["CLIArgs", "ConfigArgs", "EditArgs", "InspectArgs"]
