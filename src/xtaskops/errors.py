"""Exception hierarchy for task execution.

A task either finishes or raises the first failure it hits. Filesystem
failures surface as plain :class:`OSError`.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence


class XtaskError(Exception):
    """Base class for xtaskops errors."""

    code = "XTASK_ERROR"


class CommandError(XtaskError):
    """An external command exited with a non-zero status."""

    code = "COMMAND_FAILED"

    def __init__(self, argv: Sequence[str], returncode: int | None) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(self._message())

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv)

    def _message(self) -> str:
        return f"command failed with exit status {self.returncode}: {self.command_line}"


class CommandNotFoundError(CommandError):
    """The external command could not be spawned at all."""

    code = "COMMAND_NOT_FOUND"

    def __init__(self, argv: Sequence[str], reason: str) -> None:
        self.reason = reason
        super().__init__(argv, None)

    def _message(self) -> str:
        return f"could not run {self.argv[0]!r} ({self.reason}): {self.command_line}"
