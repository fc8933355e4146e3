"""Command: rebuild docs on every change."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command(cls=XtaskCommand, examples="  xtask docs")
@click.pass_obj
def docs(app: AppContext) -> None:
    """Run cargo docs in watch mode."""
    from xtaskops import tasks

    app.run_task("docs", lambda runner: tasks.docs(runner=runner))
