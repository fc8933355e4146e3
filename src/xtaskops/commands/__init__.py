"""Subcommand modules for xtask.

Provides register_commands() which uses deferred imports to keep
``xtask --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the built-in task commands on the root CLI group."""
    from xtaskops.commands.bloat import bloat_deps, bloat_time
    from xtaskops.commands.ci import ci
    from xtaskops.commands.coverage import coverage
    from xtaskops.commands.dev import dev
    from xtaskops.commands.docs import docs
    from xtaskops.commands.install import install
    from xtaskops.commands.powerset import powerset
    from xtaskops.commands.vars_cmd import vars_cmd

    cli.add_command(coverage)
    cli.add_command(vars_cmd)
    cli.add_command(ci)
    cli.add_command(powerset)
    cli.add_command(bloat_deps)
    cli.add_command(bloat_time)
    cli.add_command(docs)
    cli.add_command(dev)
    cli.add_command(install)
