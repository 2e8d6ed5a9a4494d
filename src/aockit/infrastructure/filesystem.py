"""Readers that turn puzzle-input files into sequences, grids and trees.

Pure parsing lives in :mod:`aockit.domain.grid` and
:mod:`aockit.domain.tree` (dependency direction: infrastructure ->
domain). This module only opens files and feeds their lines to those
builders. Open failures propagate unchanged (``FileNotFoundError`` etc.).
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from aockit.domain.grid import Grid, parse_grid, parse_number_grid
from aockit.domain.tree import TreeNode, build_outline

DEFAULT_ENCODING = "utf-8"


def open_file(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> TextIO:
    """Open *path* for reading text. The caller closes the handle."""
    return Path(path).open(encoding=encoding)


def read_single_line(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the first line of *path* without its terminator.

    An empty file yields ``""``.
    """
    with open_file(path, encoding=encoding) as fh:
        return fh.readline().rstrip("\r\n")


def read_lines(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Return every line of *path* without line terminators."""
    with open_file(path, encoding=encoding) as fh:
        return [line.rstrip("\r\n") for line in fh]


def read_grid(
    path: Path | str,
    delimiter: str = "",
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Grid[str]:
    """Read a grid of strings, splitting each line on *delimiter*.

    The default empty delimiter gives one cell per character.
    """
    return parse_grid(read_lines(path, encoding=encoding), delimiter)


def read_number_grid(
    path: Path | str,
    delimiter: str = "",
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Grid[int]:
    """Read a grid of integers, splitting each line on *delimiter*."""
    return parse_number_grid(read_lines(path, encoding=encoding), delimiter)


def read_outline(
    path: Path | str,
    indent_width: int = 2,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> TreeNode[str] | None:
    """Read an indented outline into a tree (None for a blank file)."""
    return build_outline(read_lines(path, encoding=encoding), indent_width)
