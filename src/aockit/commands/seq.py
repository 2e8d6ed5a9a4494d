"""Command group: splice the lines of an input file (seq)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aockit.commands._base import INPUT_FILE, AockitGroup

if TYPE_CHECKING:
    from aockit.commands._context import AppContext

_SEQ_EXAMPLES = """\
  aockit seq show input.txt
  aockit seq cut input.txt 1 3
  aockit seq delete input.txt 0
  aockit seq insert input.txt "new line" 2
  aockit --json seq cut input.txt 0 5"""


@click.group(cls=AockitGroup, examples=_SEQ_EXAMPLES)
@click.pass_obj
def seq(app: AppContext) -> None:
    """Cut, delete and insert lines of an input file (the file is not modified)."""


@seq.command(
    examples="""\
  aockit seq show input.txt
  aockit seq show input.txt --first
  aockit -q seq show input.txt"""
)
@click.argument("file", type=INPUT_FILE)
@click.option("--first", is_flag=True, help="Only read the first line.")
@click.pass_obj
def show(app: AppContext, file: Path, first: bool) -> None:
    """List the lines of FILE with their indices."""
    from aockit.services.sequence import SequenceService

    app.emit(SequenceService(app.settings).show(file, first_only=first))


@seq.command(
    examples="""\
  aockit seq cut input.txt 1 3
  aockit seq cut input.txt 0 0"""
)
@click.argument("file", type=INPUT_FILE)
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.pass_obj
def cut(app: AppContext, file: Path, start: int, end: int) -> None:
    """Remove lines START (inclusive) to END (exclusive)."""
    from aockit.services.sequence import SequenceService

    app.emit(SequenceService(app.settings).cut(file, start, end))


@seq.command(
    examples="""\
  aockit seq delete input.txt 0
  aockit --json seq delete input.txt 4"""
)
@click.argument("file", type=INPUT_FILE)
@click.argument("index", type=int)
@click.pass_obj
def delete(app: AppContext, file: Path, index: int) -> None:
    """Remove the line at INDEX."""
    from aockit.services.sequence import SequenceService

    app.emit(SequenceService(app.settings).delete(file, index))


@seq.command(
    examples="""\
  aockit seq insert input.txt "header" 0
  aockit seq insert input.txt "footer" 10"""
)
@click.argument("file", type=INPUT_FILE)
@click.argument("element")
@click.argument("index", type=int)
@click.pass_obj
def insert(app: AppContext, file: Path, element: str, index: int) -> None:
    """Insert ELEMENT as a new line at INDEX (INDEX may equal the line count)."""
    from aockit.services.sequence import SequenceService

    app.emit(SequenceService(app.settings).insert(file, element, index))
