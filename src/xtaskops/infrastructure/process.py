"""The process-spawning primitive every task goes through.

Commands run synchronously with inherited stdio so tool output streams
straight to the terminal. A non-zero exit raises :class:`CommandError`;
there are no retries.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import click

from xtaskops.errors import CommandError, CommandNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    """One external command: program, arguments, and extra environment."""

    argv: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)

    @property
    def program(self) -> str:
        return self.argv[0]

    @property
    def args(self) -> tuple[str, ...]:
        return self.argv[1:]

    def __str__(self) -> str:
        prefix = " ".join(f"{k}={shlex.quote(v)}" for k, v in self.env.items())
        command = shlex.join(self.argv)
        return f"{prefix} {command}" if prefix else command


class CommandRunner:
    """Run external commands in *cwd*, stopping at the first failure.

    With ``dry_run=True`` commands are echoed and recorded but never
    spawned. Every invocation, executed or not, is appended to
    :attr:`history`. Progress lines go to stderr so stdout carries only
    the task result; ``quiet=True`` drops them entirely.
    """

    def __init__(
        self, cwd: Path | None = None, *, dry_run: bool = False, quiet: bool = False
    ) -> None:
        self.cwd = cwd
        self.dry_run = dry_run
        self.quiet = quiet
        self.history: list[Invocation] = []

    def run(self, program: str, *args: str, env: dict[str, str] | None = None) -> None:
        """Run ``program *args`` with *env* layered over ``os.environ``."""
        invocation = Invocation(argv=(program, *args), env=dict(env or {}))
        self.history.append(invocation)

        if self.dry_run:
            self.echo(f"[dry-run] {invocation}")
            return

        logger.debug("Running command: %s (cwd=%s)", invocation, self.cwd)
        child_env = {**os.environ, **invocation.env} if invocation.env else None
        try:
            completed = subprocess.run(
                list(invocation.argv),
                cwd=self.cwd,
                env=child_env,
                check=False,
            )
        except OSError as exc:
            raise CommandNotFoundError(invocation.argv, exc.strerror or str(exc)) from exc

        if completed.returncode != 0:
            logger.debug("Command exited with %d: %s", completed.returncode, invocation)
            raise CommandError(invocation.argv, completed.returncode)

    def echo(self, message: str) -> None:
        """Print a progress line on stderr unless the runner is quiet."""
        if not self.quiet:
            click.echo(message, err=True)

    def launch(self, target: str) -> None:
        """Open *target* with the desktop's default application.

        A non-zero status from the opener raises :class:`CommandError`.
        """
        invocation = Invocation(argv=("launch", target))
        self.history.append(invocation)

        if self.dry_run:
            self.echo(f"[dry-run] {invocation}")
            return

        logger.debug("Opening %s", target)
        status = click.launch(target)
        if status != 0:
            raise CommandError(invocation.argv, status)
