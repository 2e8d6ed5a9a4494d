"""Command group: read grids and check coordinates (grid)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aockit.commands._base import INPUT_FILE, AockitGroup

if TYPE_CHECKING:
    from aockit.commands._context import AppContext

_GRID_EXAMPLES = """\
  aockit grid show map.txt
  aockit grid show numbers.txt --delim " " --numbers
  aockit grid bounds map.txt 0 0
  aockit --json grid bounds map.txt 3 2"""

_delim_option = click.option(
    "--delim",
    "delimiter",
    default=None,
    help='Cell delimiter (default: [input] delimiter; "" splits characters).',
)
_numbers_option = click.option("--numbers", is_flag=True, help="Parse cells as integers.")


@click.group(cls=AockitGroup, examples=_GRID_EXAMPLES)
@click.pass_obj
def grid(app: AppContext) -> None:
    """Read rectangular grids from input files."""


@grid.command(
    examples="""\
  aockit grid show map.txt
  aockit grid show data.csv --delim , --numbers
  aockit -q grid show map.txt"""
)
@click.argument("file", type=INPUT_FILE)
@_delim_option
@_numbers_option
@click.pass_obj
def show(app: AppContext, file: Path, delimiter: str | None, numbers: bool) -> None:
    """Display the grid in FILE with its dimensions."""
    from aockit.services.grid import GridService

    app.emit(GridService(app.settings).show(file, delimiter=delimiter, numbers=numbers))


@grid.command(
    examples="""\
  aockit grid bounds map.txt 0 0
  aockit -q grid bounds map.txt 4 0"""
)
@click.argument("file", type=INPUT_FILE)
@click.argument("x", type=int)
@click.argument("y", type=int)
@_delim_option
@_numbers_option
@click.pass_obj
def bounds(
    app: AppContext,
    file: Path,
    x: int,
    y: int,
    delimiter: str | None,
    numbers: bool,
) -> None:
    """Check whether column X, row Y lies inside the grid in FILE."""
    from aockit.services.grid import GridService

    app.emit(GridService(app.settings).bounds(file, x, y, delimiter=delimiter, numbers=numbers))
