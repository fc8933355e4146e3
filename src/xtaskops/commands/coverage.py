"""Command: instrumented test run and grcov report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext
    from xtaskops.infrastructure.process import CommandRunner


@click.command(
    cls=XtaskCommand,
    examples="""\
  xtask coverage
  xtask coverage --dev
  xtask --no-interact coverage --dev""",
)
@click.option("-d", "--dev", "devmode", is_flag=True, help="Generate an html report.")
@click.pass_obj
def coverage(app: AppContext, devmode: bool) -> None:
    """Run tests with coverage instrumentation and build a report."""
    from xtaskops import tasks

    def body(runner: CommandRunner) -> dict[str, str]:
        report = tasks.coverage(
            devmode,
            app.settings.coverage,
            runner=runner,
            interactive=not app.settings.no_interact,
        )
        return {"report": report}

    app.run_task("coverage", body)
