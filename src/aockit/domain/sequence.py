"""Order-preserving splice operations on mutable sequences.

Each operation validates its indices first, then mutates *seq* in place
and returns the same object so calls can be chained or reassigned.
Negative indices are rejected rather than counted from the end.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from aockit.domain.errors import IndexOutOfRange


def _check_index(value: object, name: str) -> int:
    # bool is an int subclass; True as an index is always a caller mistake.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def cut[T](seq: MutableSequence[T], start: int, end: int) -> MutableSequence[T]:
    """Remove the half-open range ``[start, end)`` from *seq*.

    The result has ``len(seq) - (end - start)`` elements and everything
    outside the range keeps its relative order. ``start == end`` removes
    nothing.

    Examples:
        >>> cut([1, 2, 3, 4, 5], 1, 3)
        [1, 4, 5]

    Raises:
        IndexOutOfRange: ``start`` or ``end`` is negative, ``start > end``,
            or ``end > len(seq)``.
    """
    start = _check_index(start, "start")
    end = _check_index(end, "end")
    length = len(seq)
    if start < 0 or end < 0 or start > end or end > length:
        msg = f"Cannot cut [{start}, {end}) from a sequence of length {length}"
        raise IndexOutOfRange(msg, index=start if start < 0 or start > end else end, length=length)
    del seq[start:end]
    return seq


def delete[T](seq: MutableSequence[T], index: int) -> MutableSequence[T]:
    """Remove the element at *index*, shifting later elements left.

    Examples:
        >>> delete([1, 9, 2, 3], 1)
        [1, 2, 3]

    Raises:
        IndexOutOfRange: *index* is not an existing position.
    """
    index = _check_index(index, "index")
    length = len(seq)
    if not 0 <= index < length:
        msg = f"Cannot delete index {index} from a sequence of length {length}"
        raise IndexOutOfRange(msg, index=index, length=length)
    del seq[index]
    return seq


def insert[T](seq: MutableSequence[T], element: T, index: int) -> MutableSequence[T]:
    """Insert *element* at *index*, shifting elements at and after it right.

    ``index == len(seq)`` appends.

    Examples:
        >>> insert([1, 2, 3], 9, 1)
        [1, 9, 2, 3]

    Raises:
        IndexOutOfRange: *index* is negative or greater than ``len(seq)``.
    """
    index = _check_index(index, "index")
    length = len(seq)
    if not 0 <= index <= length:
        msg = f"Cannot insert at index {index} into a sequence of length {length}"
        raise IndexOutOfRange(msg, index=index, length=length)
    seq.insert(index, element)
    return seq
