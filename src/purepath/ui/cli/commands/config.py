"""src/purepath/ui/cli/commands/config.py
What: Write the purepath configuration file from command line options.
Why: Let users persist the separator style and log file without editing TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import final, override

from purepath.config.config import Config
from purepath.ui.cli.args.options import ConfigArgs
from purepath.ui.cli.display.result import ResultDisplay

from .executor import CommandExecutor


@final
class ConfigCommand(CommandExecutor[ConfigArgs, Path]):
    """Handle the ``config`` subcommand."""

    display: ResultDisplay

    def __init__(self, args: ConfigArgs) -> None:
        super().__init__(args)
        self.display = ResultDisplay()

    @override
    def execute(self) -> Path:
        configuration = Config(
            separator_style=self.args.separator_style,
            log_file=self.args.log_file,
        )
        destination = configuration.save(self.args.target)
        # The cached instance no longer matches the file on disk.
        Config.reset()

        self.display.show_config_saved(destination, quiet=self.args.quiet)
        return destination
