"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the command runner and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from xtaskops.errors import XtaskError
from xtaskops.infrastructure.process import CommandRunner
from xtaskops.output.formatters import format_result
from xtaskops.result import TaskError, TaskResult

if TYPE_CHECKING:
    from xtaskops.config.settings import XtaskSettings
    from xtaskops.plugins.manager import PluginManager

TaskBody = Callable[[CommandRunner], dict[str, Any] | None]


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(
        self,
        settings: XtaskSettings,
        plugins: PluginManager | None = None,
    ) -> None:
        self.settings = settings
        self.plugins = plugins

        from xtaskops.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def make_runner(self) -> CommandRunner:
        """A fresh runner rooted at the project directory."""
        return CommandRunner(
            self.settings.project_root,
            dry_run=self.settings.dry_run,
            quiet=self.settings.json_output,
        )

    def run_task(self, op: str, body: TaskBody) -> None:
        """Run *body* with a new runner, then emit the outcome.

        Command and filesystem failures become an error result; the
        commands issued so far are reported either way.
        """
        from xtaskops.config.logging import task_context

        runner = self.make_runner()
        error: TaskError | None = None
        extra: dict[str, Any] = {}
        try:
            with task_context(op):
                extra = body(runner) or {}
        except XtaskError as exc:
            detail: dict[str, Any] = {}
            argv = getattr(exc, "argv", None)
            if argv is not None:
                detail = {"argv": argv, "returncode": getattr(exc, "returncode", None)}
            error = TaskError(code=exc.code, message=str(exc), detail=detail)
        except OSError as exc:
            error = TaskError(
                code="FILESYSTEM_ERROR",
                message=str(exc),
                detail={"path": str(exc.filename)} if exc.filename else {},
            )

        if self.plugins is not None:
            self.plugins.notify_task(op, error is None)

        data = {"commands": [str(inv) for inv in runner.history], **extra}
        self.emit(TaskResult(ok=error is None, op=op, data=data, error=error))

    def emit(self, result: TaskResult) -> None:
        """Format and output a TaskResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
