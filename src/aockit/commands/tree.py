"""Command: enumerate the nodes of an indented outline file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aockit.commands._base import INPUT_FILE, AockitCommand
from aockit.domain.tree import TraversalOrder

if TYPE_CHECKING:
    from aockit.commands._context import AppContext


@click.command(
    cls=AockitCommand,
    examples="""\
  aockit tree outline.txt
  aockit tree outline.txt --order depth-first
  aockit tree outline.txt --indent 4""",
)
@click.argument("file", type=INPUT_FILE)
@click.option(
    "--order",
    type=click.Choice([o.value for o in TraversalOrder]),
    default=None,
    help="Traversal order (default: [tree] order, sibling-first).",
)
@click.option(
    "--indent",
    "indent_width",
    type=click.IntRange(min=1),
    default=None,
    help="Spaces per nesting level (default: [tree] indent_width).",
)
@click.pass_obj
def tree(app: AppContext, file: Path, order: str | None, indent_width: int | None) -> None:
    """List every node of the outline in FILE.

    sibling-first visits a node, then its following siblings, then its
    children. depth-first finishes each child's subtree before the next.
    """
    from aockit.services.tree import TreeService

    app.emit(TreeService(app.settings).enumerate(file, order=order, indent_width=indent_width))
