"""Pluggy hook specifications for xtask extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    import click

hookspec = pluggy.HookspecMarker("xtaskops")
hookimpl = pluggy.HookimplMarker("xtaskops")


class XtaskHookSpec:
    """Hook specifications for the xtaskops plugin system."""

    @hookspec
    def xtask_commands(self) -> list[click.Command] | None:
        """Return extra click commands to mount on the ``xtask`` dispatcher."""

    @hookspec
    def post_task(self, task: str, ok: bool) -> None:
        """Called after a built-in task finishes or fails."""
