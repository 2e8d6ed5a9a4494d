"""Error taxonomy for the container toolkit.

INVARIANT: Domain operations fail immediately. They never clamp an index,
return a default value, or leave a container partially modified.
"""

from __future__ import annotations


class ToolkitError(Exception):
    """Base class for every failure raised by :mod:`aockit.domain`."""


class IndexOutOfRange(ToolkitError, IndexError):
    """An index or range argument falls outside the sequence."""

    def __init__(self, message: str, *, index: int | None = None, length: int | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.length = length


class EmptyCollection(ToolkitError, IndexError):
    """An element was requested from an empty collection."""


class ConversionError(ToolkitError, ValueError):
    """Text could not be converted to an integer."""


class OutlineError(ToolkitError, ValueError):
    """An outline's indentation does not describe a tree."""
