"""Root CLI group for xtask with global flags and command registration."""

from __future__ import annotations

import click

from xtaskops import __version__
from xtaskops.commands import register_commands
from xtaskops.commands._base import XtaskGroup
from xtaskops.commands._context import AppContext
from xtaskops.config.settings import XtaskSettings


@click.group(cls=XtaskGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="xtask")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and the full command list.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    dry_run: bool,
    config_path: str | None,
) -> None:
    """xtask — cargo repository chores: ci, coverage, powerset, bloat, docs."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(2)

    settings = XtaskSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
        dry_run=dry_run,
    )
    group = ctx.command
    plugins = group.plugin_manager(settings.project_root) if isinstance(group, XtaskGroup) else None
    ctx.obj = AppContext(settings, plugins=plugins)


register_commands(cli)
