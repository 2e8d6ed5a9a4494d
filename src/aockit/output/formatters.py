"""Output mode dispatch for ServiceResult.

Three modes, chosen by global CLI flags:
- ``--json``: the pydantic-serialised result, for machines
- ``--quiet``: bare values, one per line, for pipes
- default: Rich-rendered human output
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from aockit.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from aockit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags. When given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
