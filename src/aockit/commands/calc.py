"""Command group: integer helpers (calc)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aockit.commands._base import AockitGroup

if TYPE_CHECKING:
    from aockit.commands._context import AppContext

_CALC_EXAMPLES = """\
  aockit calc abs -- -7
  aockit calc pow 2 10
  aockit calc int 007"""


@click.group(cls=AockitGroup, examples=_CALC_EXAMPLES)
@click.pass_obj
def calc(app: AppContext) -> None:
    """Integer conversion and math helpers."""


@calc.command("abs", examples="  aockit calc abs -- -7")
@click.argument("number", type=int)
@click.pass_obj
def abs_cmd(app: AppContext, number: int) -> None:
    """Absolute value of NUMBER."""
    from aockit.services.calc import CalcService

    app.emit(CalcService(app.settings).absolute(number))


@calc.command("pow", examples="  aockit calc pow 3 4")
@click.argument("base", type=int)
@click.argument("exponent", type=int)
@click.pass_obj
def pow_cmd(app: AppContext, base: int, exponent: int) -> None:
    """BASE raised to the non-negative EXPONENT."""
    from aockit.services.calc import CalcService

    app.emit(CalcService(app.settings).power(base, exponent))


@calc.command("int", examples="  aockit calc int 007")
@click.argument("text")
@click.pass_obj
def int_cmd(app: AppContext, text: str) -> None:
    """Parse TEXT as a base-10 integer."""
    from aockit.services.calc import CalcService

    app.emit(CalcService(app.settings).parse_int(text))
