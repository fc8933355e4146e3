"""Rich/JSON output helpers.

The CLI renders TaskResult for humans (Rich text) or machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from xtaskops.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from xtaskops.result import TaskResult


def _render_commands(commands: list[str], console: Console) -> None:
    table = Table(show_header=True, header_style="xtask.key", box=None)
    table.add_column("#", justify="right")
    table.add_column("command", style="xtask.cmd")
    for index, command in enumerate(commands, start=1):
        table.add_row(str(index), escape(command))
    console.print(table)


def _render_data(data: dict[str, Any], console: Console) -> None:
    for key, value in data.items():
        if key == "commands":
            continue
        console.print(f"  [xtask.key]{key}:[/] {escape(str(value))}")


def format_result(
    result: TaskResult,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format a TaskResult for display.

    Args:
        result: The task result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        verbose: Also list every command the task issued.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[xtask.ok]OK:[/] [xtask.op]{result.op}[/]")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[xtask.error]ERROR:[/] [xtask.op]{result.op}[/] — {escape(message)}")
    _render_data(result.data, console)
    commands = result.data.get("commands") or []
    if verbose and commands:
        _render_commands(commands, console)
    return get_output(console).rstrip("\n")
