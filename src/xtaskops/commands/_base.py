"""Custom Click base classes with --examples support and plugin commands.

Provides XtaskCommand and XtaskGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
XtaskGroup also mounts commands contributed by plugins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click

from xtaskops.plugins.manager import LOCAL_PLUGIN_DIR, PluginManager

logger = logging.getLogger(__name__)


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class XtaskCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class XtaskGroup(click.Group):
    """Click Group subclass with ``--examples`` and plugin-provided commands.

    Plugins are discovered once per project root. Built-in commands win
    over plugin commands with the same name.
    """

    command_class = XtaskCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self._plugin_managers: dict[Path, PluginManager] = {}
        if examples:
            _add_examples_option(self, examples)

    def plugin_manager(self, project_root: Path) -> PluginManager:
        """Return the (cached) plugin manager for *project_root*."""
        key = project_root.resolve()
        pm = self._plugin_managers.get(key)
        if pm is None:
            pm = PluginManager()
            pm.discover_and_load(local_dir=key / LOCAL_PLUGIN_DIR)
            self._plugin_managers[key] = pm
        return pm

    def _plugin_commands(self) -> dict[str, click.Command]:
        from xtaskops.infrastructure.filesystem import root_dir

        found: dict[str, click.Command] = {}
        for command in self.plugin_manager(root_dir()).collect_commands():
            if command.name is None:
                continue
            if command.name in self.commands:
                logger.warning("Plugin command %r shadows a built-in; ignored", command.name)
                continue
            found[command.name] = command
        return found

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted({*super().list_commands(ctx), *self._plugin_commands()})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        return self._plugin_commands().get(cmd_name)
