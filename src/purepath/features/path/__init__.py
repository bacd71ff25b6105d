"""
Summary: Export the path feature domain symbols.
Why: Provide a stable import surface for the package root, the CLI and tests.
"""

from purepath.shared.path_syntax import PathSyntax

from .domain.errors import PurePathError, PurePathTypeError, PurePathValueError
from .domain.pure_path import PurePath
from .domain.suffix import is_valid_suffix, split_suffixes

__all__ = [
    "PathSyntax",
    "PurePath",
    "PurePathError",
    "PurePathTypeError",
    "PurePathValueError",
    "is_valid_suffix",
    "split_suffixes",
]
