"""Shared pytest fixtures and test helpers for xtaskops tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from xtaskops.errors import CommandError
from xtaskops.infrastructure.process import CommandRunner, Invocation

WORKSPACE_MANIFEST = '[workspace]\nmembers = ["core", "xtask"]\n'


class RecordingRunner(CommandRunner):
    """CommandRunner that records invocations without spawning anything.

    ``fail_on`` makes the first invocation whose argv starts with the
    given prefix raise :class:`CommandError`, like a failing tool would.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        *,
        fail_on: tuple[str, ...] | None = None,
        returncode: int = 101,
        quiet: bool = False,
    ) -> None:
        super().__init__(cwd, quiet=quiet)
        self.fail_on = fail_on
        self.returncode = returncode

    def run(self, program: str, *args: str, env: dict[str, str] | None = None) -> None:
        invocation = Invocation(argv=(program, *args), env=dict(env or {}))
        self.history.append(invocation)
        if self.fail_on and invocation.argv[: len(self.fail_on)] == self.fail_on:
            raise CommandError(invocation.argv, self.returncode)

    @property
    def argvs(self) -> list[list[str]]:
        return [list(inv.argv) for inv in self.history]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def runner(tmp_path: Path) -> RecordingRunner:
    """Recording runner rooted at a temp directory."""
    return RecordingRunner(tmp_path)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary cargo workspace with an xtask member."""
    (tmp_path / "Cargo.toml").write_text(WORKSPACE_MANIFEST, encoding="utf-8")
    for member in ("core", "xtask"):
        (tmp_path / member).mkdir()
        (tmp_path / member / "Cargo.toml").write_text(
            f'[package]\nname = "{member}"\nversion = "0.1.0"\n', encoding="utf-8"
        )
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Change CWD to a temp cargo workspace and clear XTASK_* env vars.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    import os

    for key in list(os.environ):
        if key.startswith("XTASK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(project_root)
    yield
