"""src/purepath/ui/cli/commands/edit.py
What: Apply a sequence of structural edits to a path string.
Why: Expose PurePath edits from the shell with per-step logging.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final, override

from purepath.features.path import PurePath, PurePathError
from purepath.platform.logging import logger
from purepath.ui.cli.args.options import EditArgs
from purepath.ui.cli.display.result import ResultDisplay
from purepath.ui.cli.models import EditResult

from .executor import CommandExecutor

EditStep = tuple[str, Callable[[PurePath], PurePath]]


@final
class EditCommand(CommandExecutor[EditArgs, EditResult]):
    """Handle the ``edit`` subcommand.

    Edits run in a fixed order: join, relative_to, with_name, with_stem,
    with_suffix, with_suffixes. The first rejected edit stops the run.
    """

    display: ResultDisplay

    def __init__(self, args: EditArgs) -> None:
        super().__init__(args)
        self.display = ResultDisplay()

    def build_steps(self) -> list[EditStep]:
        """Translate the parsed options into ordered edit steps."""

        args = self.args
        steps: list[EditStep] = []
        if args.join:
            segments = list(args.join)
            steps.append(("join", lambda p: p.join(*segments)))
        if args.relative_to is not None:
            base = args.relative_to
            steps.append(("relative_to", lambda p: p.relative_to(base)))
        if args.name is not None:
            name = args.name
            steps.append(("with_name", lambda p: p.with_name(name)))
        if args.stem is not None:
            stem = args.stem
            steps.append(("with_stem", lambda p: p.with_stem(stem)))
        if args.suffix is not None:
            suffix = args.suffix
            steps.append(("with_suffix", lambda p: p.with_suffix(suffix)))
        if args.suffixes is not None:
            suffixes = list(args.suffixes)
            steps.append(("with_suffixes", lambda p: p.with_suffixes(suffixes)))
        return steps

    @override
    def execute(self) -> EditResult:
        source = PurePath(self.args.path, syntax=self.syntax)
        current = source

        for operation, apply in self.build_steps():
            try:
                edited = apply(current)
            except PurePathError as e:
                logger.error(
                    "%s failed on %s: %s",
                    operation,
                    current,
                    e,
                    extra={
                        "path_event": "path.rejected",
                        "operation": operation,
                        "source_path": str(current),
                        "error_message": str(e),
                    },
                )
                result = EditResult(
                    source_path=str(source),
                    target_path=None,
                    success=False,
                    operation=operation,
                    error_message=str(e),
                )
                self.display.show_result(result, quiet=self.args.quiet)
                return result

            logger.debug(
                "%s: %s -> %s",
                operation,
                current,
                edited,
                extra={
                    "path_event": "path.edit",
                    "operation": operation,
                    "source_path": str(current),
                    "target_path": str(edited),
                },
            )
            current = edited

        result = EditResult(
            source_path=str(source),
            target_path=str(current),
            success=True,
        )
        self.display.show_result(result, quiet=self.args.quiet)
        return result
