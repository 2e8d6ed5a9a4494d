"""Root CLI group for aockit with global flags and command registration."""

from __future__ import annotations

import click

from aockit import __version__
from aockit.commands import register_commands
from aockit.commands._context import AppContext
from aockit.config.settings import AockitSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="aockit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (bare values).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """aockit — containers, grids and trees for puzzle input."""
    # Unset flags are left out so env vars and aockit.toml can still enable them.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    settings = AockitSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
