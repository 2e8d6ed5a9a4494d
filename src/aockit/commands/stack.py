"""Command: replay stack operations over the lines of an input file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aockit.commands._base import INPUT_FILE, AockitCommand

if TYPE_CHECKING:
    from aockit.commands._context import AppContext


@click.command(
    cls=AockitCommand,
    examples="""\
  aockit stack input.txt pop pop
  aockit stack input.txt push=x unshift=y shift
  aockit --json stack input.txt pop shift""",
)
@click.argument("file", type=INPUT_FILE)
@click.argument("operations", nargs=-1)
@click.pass_obj
def stack(app: AppContext, file: Path, operations: tuple[str, ...]) -> None:
    """Load FILE's lines into a stack and apply OPERATIONS in order.

    Each operation is one of push=VALUE, pop, unshift=VALUE or shift.
    Popped and shifted values are reported with the final stack.
    """
    from aockit.services.stack import StackService

    app.emit(StackService(app.settings).run(file, operations))
