"""Command line argument parser."""

import argparse
import logging
import sys
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import final

from purepath.config.config import SEPARATOR_STYLES, Config
from purepath.platform.logging import logger, setup_logger
from purepath.shared.path_syntax import PathSyntax
from purepath.ui.cli.args.options import CLIArgs, ConfigArgs, EditArgs, InspectArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="purepath",
            description="purepath - Inspect and edit path strings without touching the filesystem.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show the root, parts, name, stem and suffixes of each path",
        )
        _ = inspect_parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Path strings to decompose",
            metavar="PATH",
        )
        ArgumentParser._add_common_options(inspect_parser)

        edit_parser = subparsers.add_parser(
            "edit",
            help="Apply structural edits to a path and print the result",
        )
        _ = edit_parser.add_argument(
            "path",
            type=str,
            help="Path string to edit",
            metavar="PATH",
        )
        _ = edit_parser.add_argument(
            "--join",
            nargs="+",
            default=[],
            help="Segments to append beneath the path",
            metavar="SEGMENT",
        )
        _ = edit_parser.add_argument(
            "--relative-to",
            type=str,
            help="Express the path relative to this base",
            metavar="BASE",
        )
        _ = edit_parser.add_argument(
            "--name",
            type=str,
            help="Replace the final segment",
        )
        _ = edit_parser.add_argument(
            "--stem",
            type=str,
            help="Replace the stem, keeping the suffix",
        )
        _ = edit_parser.add_argument(
            "--suffix",
            type=str,
            help="Replace the last suffix (empty string removes it)",
        )
        _ = edit_parser.add_argument(
            "--suffixes",
            nargs="*",
            default=None,
            help="Replace the whole suffix chain",
            metavar="SUFFIX",
        )
        ArgumentParser._add_common_options(edit_parser)

        config_parser = subparsers.add_parser(
            "config",
            help="Write the configuration file (--style and --log-file set its values)",
        )
        _ = config_parser.add_argument(
            "--log-file",
            type=str,
            default=None,
            help="Log file to record in the configuration",
            metavar="LOG_FILE",
        )
        ArgumentParser._add_common_options(config_parser)

        return parser

    @staticmethod
    def _add_common_options(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "--style",
            choices=SEPARATOR_STYLES,
            default=None,
            help="Separator style (overrides the configured separator_style)",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            default=None,
            help="Configuration file to use instead of the default location",
            metavar="CONFIG_FILE",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show every edit step",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the configuration cannot be loaded.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_file = Path(parsed_args.config).expanduser().resolve() if parsed_args.config else None
        try:
            configuration = Config.load(config_file)
        except (tomllib.TOMLDecodeError, ValueError, TypeError):
            sys.exit(2)

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        style: str = parsed_args.style or configuration.separator_style
        syntax = PathSyntax.from_style(style)

        command: str = parsed_args.command

        if command == "inspect":
            return InspectArgs(
                command="inspect",
                paths=list(parsed_args.paths),
                syntax=syntax,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "edit":
            return ArgumentParser._process_edit(parsed_args, syntax)

        if command == "config":
            log_file = (
                Path(parsed_args.log_file).expanduser()
                if parsed_args.log_file
                else configuration.log_file
            )
            return ConfigArgs(
                command="config",
                syntax=syntax,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                separator_style=style,
                log_file=log_file,
                target=config_file,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_edit(parsed_args: argparse.Namespace, syntax: PathSyntax) -> EditArgs:
        suffixes: list[str] | None = (
            list(parsed_args.suffixes) if parsed_args.suffixes is not None else None
        )
        return EditArgs(
            command="edit",
            path=parsed_args.path,
            syntax=syntax,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            join=list(parsed_args.join),
            relative_to=parsed_args.relative_to,
            name=parsed_args.name,
            stem=parsed_args.stem,
            suffix=parsed_args.suffix,
            suffixes=suffixes,
        )


__all__ = ["ArgumentParser"]
