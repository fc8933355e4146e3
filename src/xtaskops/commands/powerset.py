"""Command: lint and test every feature combination."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from xtaskops.commands._base import XtaskCommand

if TYPE_CHECKING:
    from xtaskops.commands._context import AppContext


@click.command(
    cls=XtaskCommand,
    examples="""\
  xtask powerset
  xtask powerset --depth 3
  xtask powerset --exclude-no-default-features
  xtask powerset --exclude xtask --exclude benches""",
)
@click.option(
    "--depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of features combined at once.",
)
@click.option(
    "--exclude-no-default-features/--include-no-default-features",
    default=None,
    help="Skip the run with no features at all.",
)
@click.option(
    "--exclude",
    "exclude",
    multiple=True,
    help="Workspace member to skip (repeatable; replaces the configured list).",
)
@click.pass_obj
def powerset(
    app: AppContext,
    depth: int | None,
    exclude_no_default_features: bool | None,
    exclude: tuple[str, ...],
) -> None:
    """Perform a CI build with a powerset of features."""
    from xtaskops import tasks

    overrides: dict[str, Any] = {}
    if depth is not None:
        overrides["depth"] = depth
    if exclude_no_default_features is not None:
        overrides["exclude_no_default_features"] = exclude_no_default_features
    if exclude:
        overrides["exclude"] = list(exclude)
    options = app.settings.powerset.model_copy(update=overrides)

    app.run_task("powerset", lambda runner: tasks.powerset(options, runner=runner))
