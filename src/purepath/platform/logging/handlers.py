"""Rich console handler for path edit events.

Where: platform/logging/handlers.py
What: Render structured ``path_event`` log records with coloured separators.
Why: Keep console formatting out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that displays path strings in white with magenta separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "path.edit": ("✏️", "green"),
        "path.rejected": ("⛔", "red"),
        "path.inspect": ("🔍", "blue"),
    }
    _SEPARATORS: ClassVar[frozenset[str]] = frozenset({"/", "\\"})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _style_path_string(cls, path_string: str) -> Text:
        """Apply Rich styling to a rendered path string."""

        text = Text()
        for char in path_string:
            if char in cls._SEPARATORS:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured path events, or ``None`` for plain records."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        operation = getattr(record, "operation", None)
        if operation:
            _ = text.append(f"{operation} ", style=Style(color=color))

        source_path = getattr(record, "source_path", None)
        if source_path is not None:
            _ = text.append_text(self._style_path_string(str(source_path)))

        target_path = getattr(record, "target_path", None)
        if event == "path.edit" and target_path is not None:
            _ = text.append(" → ")
            _ = text.append_text(self._style_path_string(str(target_path)))

        error_message = getattr(record, "error_message", None)
        if event == "path.rejected" and error_message:
            _ = text.append(f" ({error_message})", style=Style(color=color))

        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render path events with dedicated styling, other records as usual."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
