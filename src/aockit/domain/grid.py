"""Rectangular grids of cells addressed by (x, y) coordinates.

A grid is a list of rows; ``x`` selects the column and ``y`` the row.
Rectangularity is assumed, not enforced: bounds are measured against
row 0's width.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from aockit.domain.errors import IndexOutOfRange
from aockit.domain.numbers import str_to_int

type Grid[T] = list[list[T]]


@dataclass(frozen=True)
class Coordinate:
    """A grid cell position: column *x*, row *y*."""

    x: int
    y: int


def dimensions[T](grid: Grid[T]) -> tuple[int, int]:
    """Return ``(columns, rows)``; ``(0, 0)`` for an empty grid."""
    if not grid:
        return 0, 0
    return len(grid[0]), len(grid)


def in_bounds[T](grid: Grid[T], coord: Coordinate) -> bool:
    """Check whether *coord* lies inside *grid*.

    Row 0 and column 0 are inside. An empty grid contains no coordinate.

    Examples:
        >>> in_bounds([[1, 2], [3, 4]], Coordinate(0, 0))
        True
        >>> in_bounds([[1, 2], [3, 4]], Coordinate(2, 0))
        False
    """
    return 0 <= coord.y < len(grid) and 0 <= coord.x < len(grid[0])


def cell[T](grid: Grid[T], coord: Coordinate) -> T:
    """Return the value stored at *coord*.

    Raises:
        IndexOutOfRange: *coord* is outside the grid, or past the end of a
            row shorter than row 0.
    """
    if not in_bounds(grid, coord):
        columns, rows = dimensions(grid)
        msg = f"Coordinate ({coord.x}, {coord.y}) is outside a {columns}x{rows} grid"
        raise IndexOutOfRange(msg)
    row = grid[coord.y]
    if coord.x >= len(row):
        msg = f"Coordinate ({coord.x}, {coord.y}) is past the end of row {coord.y}"
        raise IndexOutOfRange(msg, index=coord.x, length=len(row))
    return row[coord.x]


def split_row(line: str, delimiter: str) -> list[str]:
    """Split one text row into cells.

    An empty *delimiter* yields one cell per character.
    """
    if delimiter == "":
        return list(line)
    return line.split(delimiter)


def parse_grid(lines: Iterable[str], delimiter: str) -> Grid[str]:
    """Build a string grid, one row per line."""
    return [split_row(line, delimiter) for line in lines]


def parse_number_grid(lines: Iterable[str], delimiter: str) -> Grid[int]:
    """Build an integer grid, one row per line.

    Raises:
        ConversionError: A cell is not an integer.
    """
    return [[str_to_int(value) for value in split_row(line, delimiter)] for line in lines]
