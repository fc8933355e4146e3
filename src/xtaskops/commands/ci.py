"""Command: fmt, clippy and tests in series."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command(
    cls=XtaskCommand,
    examples="""\
  xtask ci
  xtask ci --nightly
  xtask ci --no-clippy-max
  xtask --dry-run ci""",
)
@click.option(
    "--nightly/--stable",
    default=None,
    help="Run the formatting check with the nightly toolchain.",
)
@click.option(
    "--clippy-max/--no-clippy-max",
    default=None,
    help="Turn on pedantic, nursery and 2018-idioms lints.",
)
@click.pass_obj
def ci(app: AppContext, nightly: bool | None, clippy_max: bool | None) -> None:
    """Run typical CI tasks in series: fmt, clippy, and tests."""
    from xtaskops import tasks

    overrides: dict[str, Any] = {}
    if nightly is not None:
        overrides["nightly"] = nightly
    if clippy_max is not None:
        overrides["clippy_max"] = clippy_max
    options = app.settings.ci.model_copy(update=overrides)

    app.run_task("ci", lambda runner: tasks.ci(options, runner=runner))
