"""Tests for the task functions: argument assembly and command sequences."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from tests.conftest import RecordingRunner
from xtaskops import tasks
from xtaskops.config.models import CIConfig, CoverageConfig, PowersetConfig
from xtaskops.errors import CommandError

CLIPPY_STRICT = ["-W", "clippy::pedantic", "-W", "clippy::nursery", "-W", "rust-2018-idioms"]


class TestCIArgs:
    def test_fmt_default(self) -> None:
        assert tasks.fmt_args(CIConfig()) == ["fmt", "--all", "--", "--check"]

    def test_fmt_nightly_prepends_toolchain(self) -> None:
        assert tasks.fmt_args(CIConfig(nightly=True)) == [
            "+nightly",
            "fmt",
            "--all",
            "--",
            "--check",
        ]

    def test_clippy_max_default(self) -> None:
        assert tasks.clippy_args(CIConfig()) == ["clippy", "--", "-D", "warnings", *CLIPPY_STRICT]

    def test_clippy_plain(self) -> None:
        assert tasks.clippy_args(CIConfig(clippy_max=False)) == ["clippy", "--", "-D", "warnings"]


class TestCI:
    def test_sequence(self, runner: RecordingRunner) -> None:
        tasks.ci(runner=runner)
        assert runner.argvs == [
            ["cargo", "fmt", "--all", "--", "--check"],
            ["cargo", "clippy", "--", "-D", "warnings", *CLIPPY_STRICT],
            ["cargo", "test"],
            ["cargo", "test", "--doc"],
        ]

    def test_nightly_without_clippy_max(self, runner: RecordingRunner) -> None:
        tasks.ci(CIConfig(nightly=True, clippy_max=False), runner=runner)
        assert runner.argvs[0] == ["cargo", "+nightly", "fmt", "--all", "--", "--check"]
        assert runner.argvs[1] == ["cargo", "clippy", "--", "-D", "warnings"]

    def test_stops_at_first_failure(self, tmp_path: Path) -> None:
        runner = RecordingRunner(tmp_path, fail_on=("cargo", "clippy"))
        with pytest.raises(CommandError):
            tasks.ci(runner=runner)
        assert [argv[1] for argv in runner.argvs] == ["fmt", "clippy"]


class TestPowerset:
    def test_common_args_default(self) -> None:
        assert tasks.powerset_args(PowersetConfig()) == [
            "--workspace",
            "--exclude",
            "xtask",
            "--feature-powerset",
            "--depth",
            "2",
        ]

    def test_exclude_no_default_features_appends_flag(self) -> None:
        args = tasks.powerset_args(PowersetConfig(exclude_no_default_features=True))
        assert args[-1] == "--exclude-no-default-features"

    def test_multiple_excludes(self) -> None:
        args = tasks.powerset_args(PowersetConfig(exclude=["xtask", "bench"], depth=3))
        assert args == [
            "--workspace",
            "--exclude",
            "xtask",
            "--exclude",
            "bench",
            "--feature-powerset",
            "--depth",
            "3",
        ]

    def test_sequence(self, runner: RecordingRunner) -> None:
        tasks.powerset(runner=runner)
        common = ["--workspace", "--exclude", "xtask", "--feature-powerset", "--depth", "2"]
        assert runner.argvs == [
            ["cargo", "hack", "clippy", *common, "--", "-D", "warnings"],
            ["cargo", "hack", *common, "test"],
            ["cargo", "hack", "test", *common, "--doc"],
        ]

    def test_stops_at_first_failure(self, tmp_path: Path) -> None:
        runner = RecordingRunner(tmp_path, fail_on=("cargo", "hack", "clippy"))
        with pytest.raises(CommandError):
            tasks.powerset(runner=runner)
        assert len(runner.history) == 1


class TestSimpleTasks:
    @pytest.mark.parametrize(
        "task,expected",
        [
            (tasks.docs, [["cargo", "watch", "-s", "cargo doc --no-deps"]]),
            (tasks.bloat_deps, [["cargo", "bloat", "--release", "--crates"]]),
            (tasks.bloat_time, [["cargo", "bloat", "--time", "-j", "1"]]),
            (tasks.dev, [["cargo", "watch", "-x", "check", "-x", "test"]]),
            (
                tasks.install,
                [
                    ["cargo", "install", "cargo-watch"],
                    ["cargo", "install", "cargo-hack"],
                    ["cargo", "install", "cargo-bloat"],
                ],
            ),
        ],
    )
    def test_sequence(self, runner: RecordingRunner, task, expected: list[list[str]]) -> None:
        task(runner=runner)
        assert runner.argvs == expected

    def test_install_stops_at_first_failure(self, tmp_path: Path) -> None:
        runner = RecordingRunner(tmp_path, fail_on=("cargo", "install", "cargo-hack"))
        with pytest.raises(CommandError):
            tasks.install(runner=runner)
        assert runner.argvs[-1] == ["cargo", "install", "cargo-hack"]
        assert len(runner.history) == 2


class TestCoverageArgs:
    def test_env(self) -> None:
        assert tasks.coverage_env(CoverageConfig()) == {
            "CARGO_INCREMENTAL": "0",
            "RUSTFLAGS": "-Cinstrument-coverage",
            "LLVM_PROFILE_FILE": "cargo-test-%p-%m.profraw",
        }

    @pytest.mark.parametrize(
        "devmode,fmt,output",
        [(True, "html", "coverage/html"), (False, "lcov", "coverage/tests.lcov")],
    )
    def test_grcov_args(self, devmode: bool, fmt: str, output: str) -> None:
        assert tasks.grcov_args(CoverageConfig(), devmode=devmode) == [
            ".",
            "--binary-path",
            "./target/debug/deps",
            "-s",
            ".",
            "-t",
            fmt,
            "--branch",
            "--ignore-not-existing",
            "--ignore",
            "../*",
            "--ignore",
            "/*",
            "--ignore",
            "xtask/*",
            "--ignore",
            "*/src/tests/*",
            "-o",
            output,
        ]


class TestCoverage:
    @pytest.fixture
    def workspace(self, tmp_path: Path) -> Path:
        (tmp_path / "coverage").mkdir()
        (tmp_path / "coverage" / "stale.lcov").write_text("old")
        (tmp_path / "core").mkdir()
        (tmp_path / "cargo-test-1-a.profraw").write_text("x")
        (tmp_path / "core" / "cargo-test-2-b.profraw").write_text("x")
        return tmp_path

    def test_ci_mode(self, workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
        runner = RecordingRunner(workspace)
        report = tasks.coverage(runner=runner)

        assert report == "coverage/tests.lcov"
        assert (workspace / "coverage").is_dir()
        assert list((workspace / "coverage").iterdir()) == []
        assert list(workspace.glob("**/*.profraw")) == []

        test_run, grcov = runner.history
        assert test_run.argv == ("cargo", "test")
        assert test_run.env == tasks.coverage_env(CoverageConfig())
        assert grcov.program == "grcov"
        assert grcov.env == {}
        assert grcov.argv[-2:] == ("-o", "coverage/tests.lcov")

        out = capsys.readouterr().err
        assert out.splitlines() == [
            "=== running coverage ===",
            "ok.",
            "=== generating report ===",
            "ok.",
            "=== cleaning up ===",
            "ok.",
        ]

    def test_failed_tests_skip_report(self, workspace: Path) -> None:
        runner = RecordingRunner(workspace, fail_on=("cargo", "test"))
        with pytest.raises(CommandError):
            tasks.coverage(runner=runner)
        assert len(runner.history) == 1
        assert (workspace / "cargo-test-1-a.profraw").exists()

    def test_dev_mode_opens_report(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        launched: list[str] = []
        monkeypatch.setattr(tasks, "confirm", lambda question: True)
        monkeypatch.setattr(click, "launch", lambda url: launched.append(url) or 0)

        report = tasks.coverage(True, runner=RecordingRunner(workspace))

        assert report == "coverage/html"
        assert launched == [str(workspace / "coverage" / "html")]

    def test_dev_mode_declined_prints_location(
        self,
        workspace: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(tasks, "confirm", lambda question: False)
        tasks.coverage(True, runner=RecordingRunner(workspace))
        assert "report location: coverage/html" in capsys.readouterr().err

    def test_non_interactive_never_prompts(
        self,
        workspace: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def fail_prompt(question: str) -> bool:
            raise AssertionError("prompted in non-interactive mode")

        monkeypatch.setattr(tasks, "confirm", fail_prompt)
        tasks.coverage(True, runner=RecordingRunner(workspace), interactive=False)
        assert "report location: coverage/html" in capsys.readouterr().err

    def test_dry_run_leaves_files(self, workspace: Path) -> None:
        from xtaskops.infrastructure.process import CommandRunner

        runner = CommandRunner(workspace, dry_run=True)
        tasks.coverage(runner=runner)
        assert (workspace / "coverage" / "stale.lcov").exists()
        assert (workspace / "cargo-test-1-a.profraw").exists()
        assert [inv.program for inv in runner.history] == ["cargo", "grcov"]

    def test_dev_mode_open_failure_raises(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(tasks, "confirm", lambda question: True)
        monkeypatch.setattr(click, "launch", lambda url: 1)
        runner = RecordingRunner(workspace)

        with pytest.raises(CommandError) as excinfo:
            tasks.coverage(True, runner=runner)

        assert excinfo.value.returncode == 1
        assert runner.history[-1].argv == ("launch", str(workspace / "coverage" / "html"))

    def test_dry_run_never_opens_report(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from xtaskops.infrastructure.process import CommandRunner

        def fail_launch(url: str) -> int:
            raise AssertionError("opened report during dry run")

        monkeypatch.setattr(tasks, "confirm", lambda question: True)
        monkeypatch.setattr(click, "launch", fail_launch)
        runner = CommandRunner(workspace, dry_run=True, quiet=True)
        tasks.coverage(True, runner=runner)
        assert [inv.program for inv in runner.history] == ["cargo", "grcov", "launch"]
