# Where: purepath.shared.__init__
# What: Provide a concise import surface for shared path primitives.
# Why: Let features and the CLI agree on one PathSyntax definition.

"""Shared cross-cutting primitives exposed at the package level."""

from .path_syntax import NATIVE, POSIX, WINDOWS, PathSyntax, SyntaxStyle

__all__ = ["NATIVE", "POSIX", "WINDOWS", "PathSyntax", "SyntaxStyle"]
