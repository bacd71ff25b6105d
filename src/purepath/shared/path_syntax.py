"""Separator-aware path string primitives.

This module wraps a host path module (``posixpath`` or ``ntpath``) behind a
small value object so the path feature can stay agnostic of the platform
flavour. Nothing here reimplements path parsing: every operation delegates to
the wrapped module, and nothing here touches the filesystem.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from dataclasses import dataclass
from types import ModuleType
from typing import Final, Literal

SyntaxStyle = Literal["native", "posix", "windows"]


@dataclass(frozen=True, slots=True)
class PathSyntax:
    """Pure string operations for a single separator flavour."""

    module: ModuleType
    style: SyntaxStyle

    @classmethod
    def from_style(cls, style: str) -> PathSyntax:
        """Return the syntax registered for ``style``.

        Raises:
            ValueError: If ``style`` is not a known separator style.
        """
        try:
            return _SYNTAXES[style]
        except KeyError:
            known = ", ".join(sorted(_SYNTAXES))
            raise ValueError(f"Unknown path style '{style}' (expected one of {known})") from None

    @property
    def sep(self) -> str:
        return self.module.sep

    @property
    def altsep(self) -> str | None:
        return self.module.altsep

    @property
    def curdir(self) -> str:
        return self.module.curdir

    def join(self, first: str, *others: str) -> str:
        return self.module.join(first, *others)

    def normalize(self, path: str) -> str:
        return self.module.normpath(path)

    def dirname(self, path: str) -> str:
        return self.module.dirname(path)

    def basename(self, path: str) -> str:
        return self.module.basename(path)

    def is_absolute(self, path: str) -> bool:
        return self.module.isabs(path)

    def parse_root(self, path: str) -> str:
        """Return the drive and root of ``path`` as one string (``""`` if relative)."""

        drive, root, _tail = self.module.splitroot(path)
        return drive + root

    def strip_root(self, path: str) -> str:
        """Return ``path`` without its drive and root."""

        _drive, _root, tail = self.module.splitroot(path)
        return tail

    def has_separator(self, text: str) -> bool:
        """Return whether ``text`` contains a separator of this flavour."""

        if self.sep in text:
            return True
        return bool(self.altsep) and self.altsep in text


POSIX: Final[PathSyntax] = PathSyntax(posixpath, "posix")
WINDOWS: Final[PathSyntax] = PathSyntax(ntpath, "windows")
NATIVE: Final[PathSyntax] = PathSyntax(os.path, "native")

_SYNTAXES: Final[dict[str, PathSyntax]] = {
    "native": NATIVE,
    "posix": POSIX,
    "windows": WINDOWS,
}


__all__ = ["NATIVE", "POSIX", "WINDOWS", "PathSyntax", "SyntaxStyle"]
