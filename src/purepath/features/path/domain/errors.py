"""
Summary: Exception types raised by pure path construction and edits.
Why: Let callers catch path failures as TypeError/ValueError or as one family.
"""

from __future__ import annotations


class PurePathError(Exception):
    """Base class for every error raised by the path feature."""


class PurePathTypeError(PurePathError, TypeError):
    """Raised when an argument has an unsupported type."""


class PurePathValueError(PurePathError, ValueError):
    """Raised when an operation is structurally invalid for the receiver."""


__all__ = ["PurePathError", "PurePathTypeError", "PurePathValueError"]
