"""Subcommand modules for aockit.

Provides register_commands() which uses deferred imports to keep
``aockit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from aockit.commands.calc import calc
    from aockit.commands.grid import grid
    from aockit.commands.seq import seq

    cli.add_command(seq)
    cli.add_command(grid)
    cli.add_command(calc)

    # --- Standalone commands ---
    from aockit.commands.stack import stack
    from aockit.commands.tree import tree

    cli.add_command(stack)
    cli.add_command(tree)
