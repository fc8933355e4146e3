"""Command: show resolved paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xtaskops.commands._base import XtaskCommand
from xtaskops.result import TaskResult

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command("vars", cls=XtaskCommand, examples="  xtask vars\n  xtask --json vars")
@click.pass_obj
def vars_cmd(app: AppContext) -> None:
    """Print the project root and the loaded config file."""
    data: dict[str, str] = {"root": str(app.settings.project_root)}
    if app.settings.config_path is not None:
        data["config"] = str(app.settings.config_path)
    app.emit(TaskResult(ok=True, op="vars", data=data))
