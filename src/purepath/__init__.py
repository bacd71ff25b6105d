"""Pure, filesystem-independent path values."""

from purepath.features.path import (
    PurePath,
    PurePathError,
    PurePathTypeError,
    PurePathValueError,
)
from purepath.shared.path_syntax import NATIVE, POSIX, WINDOWS, PathSyntax

__all__ = [
    "NATIVE",
    "POSIX",
    "WINDOWS",
    "PathSyntax",
    "PurePath",
    "PurePathError",
    "PurePathTypeError",
    "PurePathValueError",
]
