"""src/purepath/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from purepath.features.path import PurePath


@dataclass(slots=True, frozen=True)
class PathReport:
    """Derived attributes of one path, flattened for display."""

    path: str
    root: str
    parts: tuple[str, ...]
    name: str
    stem: str
    suffix: str
    suffixes: tuple[str, ...]
    parent: str
    is_absolute: bool
    uri: str

    @classmethod
    def from_path(cls, path: PurePath) -> PathReport:
        return cls(
            path=str(path),
            root=path.root,
            parts=path.parts,
            name=path.name,
            stem=path.stem,
            suffix=path.suffix,
            suffixes=tuple(path.suffixes),
            parent=str(path.parent),
            is_absolute=path.is_absolute(),
            uri=path.as_uri(),
        )


@dataclass(slots=True, frozen=True)
class EditResult:
    """Outcome of an ``edit`` run."""

    source_path: str
    target_path: str | None
    success: bool
    operation: str | None = None
    error_message: str | None = None


__all__ = ["EditResult", "PathReport"]
