"""
Summary: Immutable path value with derived attributes and structural edits.
Why: Manipulate path strings (names, parents, suffixes) without touching disk.
"""

from __future__ import annotations

from typing import Any, Final, final, override

from purepath.platform.logging import logger
from purepath.shared.path_syntax import NATIVE, PathSyntax

from .errors import PurePathError, PurePathTypeError, PurePathValueError
from .suffix import split_suffixes, validate_suffix, validate_suffixes

# Final segments that name no file or directory of their own.
_NON_NAMES: Final[frozenset[str]] = frozenset(("", ".", ".."))


@final
class PurePath:
    """Normalized path string and the operations derived from it.

    The canonical string is computed once, at construction, by joining the
    given segments and normalizing the result. Every edit returns a new
    instance built with the same ``PathSyntax``; the receiver never changes.
    """

    __slots__ = ("_path", "_syntax", "_parts")

    _path: str
    _syntax: PathSyntax
    _parts: tuple[str, ...] | None

    def __init__(self, *segments: str | PurePath, syntax: PathSyntax | None = None) -> None:
        """Join and normalize ``segments`` into a canonical path.

        Segments after the first non-empty one are appended beneath it even
        when they carry their own root, so ``PurePath("/a", "/b")`` is ``/a/b``.

        Args:
            *segments: Path segments, each a ``str`` or a ``PurePath``.
            syntax: Separator flavour. Defaults to the flavour of the first
                ``PurePath`` segment, or the host-native one.

        Raises:
            PurePathTypeError: If a segment is neither ``str`` nor ``PurePath``.
        """
        texts: list[str] = []
        for segment in segments:
            if isinstance(segment, PurePath):
                texts.append(segment._path)
                if syntax is None:
                    syntax = segment._syntax
            elif isinstance(segment, str):
                texts.append(segment)
            else:
                raise PurePathTypeError(
                    "Invalid type for argument path. "
                    f"Expected one of (str, PurePath), got {type(segment).__name__}"
                )

        if syntax is None:
            syntax = NATIVE

        raw_segments: list[str] = []
        for text in texts:
            if any(raw_segments):
                text = syntax.strip_root(text)
            raw_segments.append(text)

        joined = syntax.join(*raw_segments) if raw_segments else syntax.curdir
        object.__setattr__(self, "_syntax", syntax)
        object.__setattr__(self, "_path", syntax.normalize(joined))
        object.__setattr__(self, "_parts", None)

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @override
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Representation ----------------------------------------------------------

    @override
    def __str__(self) -> str:
        return self._path

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PurePath):
            return NotImplemented
        return self._path == other._path and self._syntax.sep == other._syntax.sep

    @override
    def __hash__(self) -> int:
        return hash((self._path, self._syntax.sep))

    def __truediv__(self, other: str | PurePath) -> PurePath:
        if not isinstance(other, (str, PurePath)):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: str) -> PurePath:
        if not isinstance(other, str):
            return NotImplemented
        return PurePath(other, self, syntax=self._syntax)

    def to_string(self) -> str:
        """Return the canonical string form; same as ``str(self)``."""

        return self._path

    def as_posix(self) -> str:
        """Return the path with every separator replaced by ``/``."""

        return self._path.replace(self._syntax.sep, "/")

    def as_uri(self) -> str:
        """Return the path as a ``file://`` URI.

        Special characters are not percent-encoded.
        """
        return f"file://{self.as_posix()}"

    # Derived attributes ------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def syntax(self) -> PathSyntax:
        return self._syntax

    @property
    def root(self) -> str:
        """Drive and root of the path, or ``""`` when it is relative."""

        return self._syntax.parse_root(self._path)

    @property
    def parts(self) -> tuple[str, ...]:
        """Root followed by every segment; a root path is just ``(root,)``.

        Memoized on first access. Relative paths have no root entry.
        """
        cached = self._parts
        if cached is None:
            cached = self._split_parts()
            object.__setattr__(self, "_parts", cached)
        return cached

    def _split_parts(self) -> tuple[str, ...]:
        root = self.root
        if root == self._path:
            return (root,)

        segments = tuple(
            segment
            for segment in self._path[len(root):].split(self._syntax.sep)
            if segment
        )
        return (root, *segments) if root else segments

    @property
    def name(self) -> str:
        """Final path segment, ``""`` for a root path."""

        return self._syntax.basename(self._path)

    @property
    def parent(self) -> PurePath:
        """Logical parent. A root path is its own parent."""

        return PurePath(self._syntax.dirname(self._path), syntax=self._syntax)

    @property
    def suffixes(self) -> list[str]:
        return split_suffixes(self.name)

    @property
    def suffix(self) -> str:
        suffixes = self.suffixes
        return suffixes[-1] if suffixes else ""

    @property
    def stem(self) -> str:
        """Final segment without its last suffix."""

        name = self.name
        suffix = self.suffix
        return name[: len(name) - len(suffix)] if suffix else name

    def is_absolute(self) -> bool:
        return self._syntax.is_absolute(self._path)

    def has_name(self) -> bool:
        """Return whether the final segment is a name that edits may replace.

        Root paths and paths ending in ``.`` or ``..`` have none.
        """
        return self.name not in _NON_NAMES

    # Structural edits --------------------------------------------------------

    def join(self, *segments: str | PurePath) -> PurePath:
        """Return a new path with ``segments`` appended beneath this one."""

        return PurePath(self, *segments, syntax=self._syntax)

    def relative_to(self, other: str | PurePath) -> PurePath:
        """Return this path relative to ``other``.

        The comparison is made segment by segment, so ``/usr/local-old`` is
        not considered to be inside ``/usr/local``.

        Args:
            other: Base path, as a string or ``PurePath``.

        Returns:
            PurePath: Remaining segments as a relative path (``.`` if equal).

        Raises:
            PurePathTypeError: If ``other`` is neither ``str`` nor ``PurePath``.
            PurePathValueError: If this path does not start with ``other``.
        """
        base = PurePath(other, syntax=self._syntax)
        if base._path == self._syntax.curdir and not self.is_absolute():
            base_parts: tuple[str, ...] = ()
        else:
            base_parts = base.parts

        parts = self.parts
        if parts[: len(base_parts)] != base_parts:
            raise self._rejected(
                "relative_to",
                PurePathValueError(f"'{self._path}' does not start with '{base._path}'"),
            )

        return PurePath(*parts[len(base_parts):], syntax=self._syntax)

    def is_relative_to(self, other: str | PurePath) -> bool:
        """Return whether ``relative_to(other)`` would succeed."""

        try:
            _ = self.relative_to(other)
        except PurePathValueError:
            return False
        return True

    def with_name(self, name: str) -> PurePath:
        """Return a new path with the final segment replaced by ``name``.

        Raises:
            PurePathTypeError: If ``name`` is not a string.
            PurePathValueError: If this path has no name, or ``name`` is empty,
                ``.``, ``..`` or contains a separator.
        """
        if not isinstance(name, str):
            raise self._rejected(
                "with_name",
                PurePathTypeError(f"name should be a str, got {type(name).__name__}"),
            )
        if not self.has_name():
            raise self._rejected(
                "with_name", PurePathValueError(f"{self!r} has an empty name")
            )
        if name in _NON_NAMES or self._syntax.has_separator(name):
            raise self._rejected("with_name", PurePathValueError(f"Invalid name '{name}'"))

        return self._replace_name(name)

    def with_stem(self, stem: str) -> PurePath:
        """Return a new path with the stem replaced, keeping the suffix verbatim.

        Raises:
            PurePathTypeError: If ``stem`` is not a string.
            PurePathValueError: If this path has no name, ``stem`` contains a
                separator, or the new name would be empty, ``.`` or ``..``.
        """
        if not isinstance(stem, str):
            raise self._rejected(
                "with_stem",
                PurePathTypeError(f"stem should be a str, got {type(stem).__name__}"),
            )
        if not self.has_name():
            raise self._rejected(
                "with_stem", PurePathValueError(f"{self!r} has an empty name")
            )

        name = f"{stem}{self.suffix}"
        if name in _NON_NAMES or self._syntax.has_separator(stem):
            raise self._rejected("with_stem", PurePathValueError(f"Invalid stem '{stem}'"))

        return self._replace_name(name)

    def with_suffix(self, suffix: str) -> PurePath:
        """Return a new path with the last suffix replaced by ``suffix``.

        An empty ``suffix`` removes the last suffix.

        Raises:
            PurePathTypeError: If ``suffix`` is not a string.
            PurePathValueError: If ``suffix`` is malformed or this path has no name.
        """
        try:
            suffix = validate_suffix(suffix)
        except PurePathError as exc:
            _ = self._rejected("with_suffix", exc)
            raise
        if not self.has_name():
            raise self._rejected(
                "with_suffix", PurePathValueError(f"{self!r} has an empty suffix")
            )

        trimmed = self._path[: len(self._path) - len(self.suffix)]
        return PurePath(f"{trimmed}{suffix}", syntax=self._syntax)

    def with_suffixes(self, suffixes: list[str] | tuple[str, ...]) -> PurePath:
        """Return a new path with the whole suffix chain replaced.

        Raises:
            PurePathTypeError: If ``suffixes`` is not a list or tuple.
            PurePathValueError: If an item is malformed (the message names its
                position) or this path has no name.
        """
        try:
            new_suffixes = validate_suffixes(suffixes)
        except PurePathError as exc:
            _ = self._rejected("with_suffixes", exc)
            raise
        if not self.has_name():
            raise self._rejected(
                "with_suffixes", PurePathValueError(f"{self!r} has an empty suffix")
            )

        chain_length = len("".join(self.suffixes))
        trimmed = self._path[: len(self._path) - chain_length]
        return PurePath(f"{trimmed}{''.join(new_suffixes)}", syntax=self._syntax)

    def _replace_name(self, name: str) -> PurePath:
        return PurePath(*self.parts[:-1], name, syntax=self._syntax)

    def _rejected(self, operation: str, error: PurePathError) -> PurePathError:
        logger.debug(
            "Rejected %s on %s: %s",
            operation,
            self._path,
            error,
            extra={
                "path_event": "path.rejected",
                "operation": operation,
                "source_path": self._path,
                "error_message": str(error),
            },
        )
        return error


__all__ = ["PurePath"]
