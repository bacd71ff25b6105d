"""
Summary: Split file names into suffix tokens and validate replacement suffixes.
Why: Keep the dotfile and multi-extension rules in one place for every accessor.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import PurePathTypeError, PurePathValueError

# A dot followed by one or more ASCII letters or digits.
SUFFIX_PATTERN: Final[re.Pattern[str]] = re.compile(r"\.[0-9A-Za-z]+")

_DOT: Final[str] = "."


def split_suffixes(name: str) -> list[str]:
    """Return the extension tokens of ``name`` in order.

    A single leading dot marks a hidden file and is not a suffix separator, so
    ``.file`` has no suffixes while ``.file.tar.gz`` has ``[".tar", ".gz"]``.

    Args:
        name: Final path segment. May be empty for a root path.

    Returns:
        list[str]: Suffixes including their leading dot, or an empty list.
    """
    if not name or name.endswith(_DOT):
        return []

    body = name[1:] if name.startswith(_DOT) else name
    return [f"{_DOT}{token}" for token in body.split(_DOT)[1:]]


def is_valid_suffix(suffix: str) -> bool:
    """Return whether ``suffix`` may replace an existing suffix."""

    return suffix == "" or SUFFIX_PATTERN.fullmatch(suffix) is not None


def validate_suffix(suffix: object) -> str:
    """Validate a single replacement suffix.

    Raises:
        PurePathTypeError: If ``suffix`` is not a string.
        PurePathValueError: If ``suffix`` is neither empty nor a dot followed by
            alphanumerics.
    """
    if not isinstance(suffix, str):
        raise PurePathTypeError(
            f"suffix should be a str, got {type(suffix).__name__}"
        )
    if not is_valid_suffix(suffix):
        raise PurePathValueError(f"Invalid suffix '{suffix}'")
    return suffix


def validate_suffixes(suffixes: object) -> list[str]:
    """Validate an ordered collection of replacement suffixes.

    Raises:
        PurePathTypeError: If ``suffixes`` is not a list or tuple.
        PurePathValueError: If any item is not a valid suffix; the message names
            the offending position.
    """
    if not isinstance(suffixes, (list, tuple)):
        raise PurePathTypeError(
            f"suffixes should be a list or tuple of str, got {type(suffixes).__name__}"
        )

    validated: list[str] = []
    for position, suffix in enumerate(suffixes):
        if not isinstance(suffix, str) or not is_valid_suffix(suffix):
            raise PurePathValueError(f"Invalid suffix '{suffix}' at pos {position}")
        validated.append(suffix)
    return validated


__all__ = [
    "SUFFIX_PATTERN",
    "is_valid_suffix",
    "split_suffixes",
    "validate_suffix",
    "validate_suffixes",
]
