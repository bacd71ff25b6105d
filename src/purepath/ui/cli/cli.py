"""Command line interface for purepath."""

import sys
from typing import final

from purepath.platform.logging import logger
from purepath.ui.cli.args import ArgumentParser
from purepath.ui.cli.args.options import CLIArgs, ConfigArgs, EditArgs
from purepath.ui.cli.commands import ConfigCommand, EditCommand, InspectCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, EditArgs):
                result = EditCommand(args).execute()
                if not result.success:
                    sys.exit(1)
                return

            if isinstance(args, ConfigArgs):
                _ = ConfigCommand(args).execute()
                return

            _ = InspectCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
