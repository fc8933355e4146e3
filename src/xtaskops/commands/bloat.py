"""Commands: dependency size and build-time analysis via cargo-bloat."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command("bloat-deps", cls=XtaskCommand, examples="  xtask bloat-deps")
@click.pass_obj
def bloat_deps(app: AppContext) -> None:
    """Show biggest crates in release build."""
    from xtaskops import tasks

    app.run_task("bloat-deps", lambda runner: tasks.bloat_deps(runner=runner))


@click.command("bloat-time", cls=XtaskCommand, examples="  xtask bloat-time")
@click.pass_obj
def bloat_time(app: AppContext) -> None:
    """Show crate build times."""
    from xtaskops import tasks

    app.run_task("bloat-time", lambda runner: tasks.bloat_time(runner=runner))
