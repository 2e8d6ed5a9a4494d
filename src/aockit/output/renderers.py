"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer. Input text is
always wrapped in :class:`~rich.text.Text` so brackets in puzzle input
are never parsed as markup.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from aockit.output.console import create_console, get_output, style_for_bool

if TYPE_CHECKING:
    from rich.console import Console

    from aockit.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    List results print one item per line and scalar answers print the
    bare value, so quiet output can be piped into other tools.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "grid" in data:
        grid = data["grid"]
        # Character grids round-trip as-is; anything wider is space separated.
        single = all(isinstance(c, str) and len(c) == 1 for row in grid for c in row)
        sep = "" if single else " "
        return "\n".join(sep.join(str(c) for c in row) for row in grid)
    if "items" in data:
        return "\n".join(str(item) for item in data["items"])
    if "in_bounds" in data:
        return "true" if data["in_bounds"] else "false"
    if "value" in data:
        return str(data["value"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="aockit.ok")
    op = Text(f"  {result.op}", style="aockit.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="aockit.key")
    v = Text(str(value), style=style)
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _numbered(console: Console, items: list[Any]) -> None:
    """Print items one per line with their index."""
    width = len(str(max(len(items) - 1, 0)))
    for index, item in enumerate(items):
        console.print(
            Text(f"  {index:>{width}}  ", style="aockit.index"),
            Text(str(item)),
            sep="",
            end="",
        )
        console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="aockit.error")
    op = Text(f"  {result.op}", style="aockit.op")
    code = Text(f" [{err.code}]" if err else "", style="dim")
    console.print(label, op, code, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Sequence / stack renderers ────────────────────────────────────────


def _render_items(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render seq_* and stack_run results: removed values, then the list."""
    _status_line(console, result)
    d = result.data
    removed = d.get("removed")
    if isinstance(removed, list) and removed:
        _field(console, "removed", ", ".join(str(r) for r in removed), style="aockit.removed")
    elif removed is not None and not isinstance(removed, list):
        _field(console, "removed", removed, style="aockit.removed")
    if "inserted" in d:
        _field(console, "inserted", f"{d['inserted']} @ {d.get('index')}")
    _field(console, "count", d.get("count", 0))
    items = d.get("items", [])
    if items:
        console.print()
        _numbered(console, items)
    if verbose:
        _render_meta(console, result)


# ── Grid renderers ────────────────────────────────────────────────────


def _grid_table(grid: list[list[Any]]) -> Table:
    """Build a Rich Table labelled with column indices (header) and row indices."""
    width = max((len(row) for row in grid), default=0)
    table = Table(show_header=True, show_lines=False, pad_edge=False, box=None)
    table.add_column("", style="aockit.index", justify="right")
    for x in range(width):
        table.add_column(str(x), style="aockit.value", justify="right")
    for y, row in enumerate(grid):
        table.add_row(str(y), *(Text(str(value)) for value in row))
    return table


def _render_grid(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "size", f"{d.get('columns', 0)}x{d.get('rows', 0)}")
    grid = d.get("grid", [])
    if grid:
        console.print()
        console.print(_grid_table(grid))
    if verbose:
        _render_meta(console, result)


def _render_bounds(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    inside = bool(d.get("in_bounds"))
    _field(console, "coordinate", f"({d.get('x')}, {d.get('y')})")
    _field(console, "size", f"{d.get('columns', 0)}x{d.get('rows', 0)}")
    _field(console, "in_bounds", str(inside).lower(), style=style_for_bool(inside))
    if inside and d.get("value") is not None:
        _field(console, "value", d.get("value"), style="aockit.value")
    if verbose:
        _render_meta(console, result)


# ── Tree renderer ─────────────────────────────────────────────────────


def _render_tree(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "order", d.get("order", ""))
    _field(console, "count", d.get("count", 0))
    items = d.get("items", [])
    if items:
        console.print()
        _numbered(console, items)
    if verbose:
        _render_meta(console, result)


# ── Calc renderer ─────────────────────────────────────────────────────


def _render_value(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value, style="aockit.value" if key == "value" else "")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    # Sequence
    "seq_show": _render_items,
    "seq_cut": _render_items,
    "seq_delete": _render_items,
    "seq_insert": _render_items,
    # Stack
    "stack_run": _render_items,
    # Grid
    "grid_show": _render_grid,
    "grid_bounds": _render_bounds,
    # Tree
    "tree_enumerate": _render_tree,
    # Calc
    "calc_abs": _render_value,
    "calc_pow": _render_value,
    "calc_int": _render_value,
}
