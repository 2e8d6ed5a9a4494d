"""GridService — read grids from files and answer coordinate queries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from aockit.domain.grid import Coordinate, Grid, cell, dimensions, in_bounds
from aockit.infrastructure.filesystem import read_grid, read_number_grid
from aockit.services.base import HANDLED_ERRORS, BaseService
from aockit.services.result import ServiceResult

logger = logging.getLogger(__name__)


def ragged_row_warnings(grid: Grid[Any]) -> list[str]:
    """Describe every row whose width differs from row 0."""
    columns, _rows = dimensions(grid)
    return [
        f"Row {y} has {len(row)} cells, expected {columns}"
        for y, row in enumerate(grid)
        if len(row) != columns
    ]


class GridService(BaseService):
    """Grid reads honour ``[input] delimiter`` unless a delimiter is passed."""

    def _load(self, path: Path, delimiter: str | None, numbers: bool) -> Grid[Any]:
        delim = self._settings.input.delimiter if delimiter is None else delimiter
        if numbers:
            return read_number_grid(path, delim, encoding=self.encoding)
        return read_grid(path, delim, encoding=self.encoding)

    def show(
        self,
        path: Path,
        *,
        delimiter: str | None = None,
        numbers: bool = False,
    ) -> ServiceResult:
        """Return the grid cells with its dimensions."""
        op = "grid_show"
        try:
            grid = self._load(path, delimiter, numbers)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)
        columns, rows = dimensions(grid)
        return ServiceResult(
            ok=True,
            op=op,
            data={"columns": columns, "rows": rows, "grid": grid},
            warnings=ragged_row_warnings(grid),
            meta=self._meta(path),
        )

    def bounds(
        self,
        path: Path,
        x: int,
        y: int,
        *,
        delimiter: str | None = None,
        numbers: bool = False,
    ) -> ServiceResult:
        """Check whether ``(x, y)`` is inside the grid; include the cell if so."""
        op = "grid_bounds"
        try:
            grid = self._load(path, delimiter, numbers)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc)
        coord = Coordinate(x, y)
        inside = in_bounds(grid, coord)
        # A short row has no cell here even though row 0 does.
        value = cell(grid, coord) if inside and x < len(grid[y]) else None
        columns, rows = dimensions(grid)
        logger.debug("(%d, %d) in %dx%d grid: %s", x, y, columns, rows, inside)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "x": x,
                "y": y,
                "in_bounds": inside,
                "value": value,
                "columns": columns,
                "rows": rows,
            },
            warnings=ragged_row_warnings(grid),
            meta=self._meta(path),
        )
