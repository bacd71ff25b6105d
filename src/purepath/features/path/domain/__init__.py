"""
Summary: Domain objects for pure path manipulation.
Why: Group the value type with its suffix rules and error types.
"""

from .errors import PurePathError, PurePathTypeError, PurePathValueError
from .pure_path import PurePath

__all__ = ["PurePath", "PurePathError", "PurePathTypeError", "PurePathValueError"]
