"""Command: install the cargo tools the tasks shell out to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command(cls=XtaskCommand, examples="  xtask install")
@click.pass_obj
def install(app: AppContext) -> None:
    """Install cargo-watch, cargo-hack and cargo-bloat."""
    from xtaskops import tasks

    app.run_task("install", lambda runner: tasks.install(runner=runner))
