"""TaskResult and TaskError — what the CLI reports after a task.

Tasks themselves raise on failure; the command layer converts the
outcome into a TaskResult for rendering.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class TaskError(BaseModel):
    """Structured error payload within a TaskResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class TaskResult(BaseModel):
    """Outcome of one CLI task.

    Attributes:
        ok: Whether the task succeeded.
        op: Name of the task (e.g. ``"ci"``).
        data: Task-specific payload; always includes the issued commands.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: TaskError | None = None
