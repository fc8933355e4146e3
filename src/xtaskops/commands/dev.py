"""Command: check and test on every change."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command(cls=XtaskCommand, examples="  xtask dev")
@click.pass_obj
def dev(app: AppContext) -> None:
    """Watch changes; run cargo check, then cargo test if check passes."""
    from xtaskops import tasks

    app.run_task("dev", lambda runner: tasks.dev(runner=runner))
