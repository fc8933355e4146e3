"""Complete xtask tasks such as ``docs``, ``ci`` and others.

Every task is a fixed sequence of external commands issued through a
:class:`~xtaskops.infrastructure.process.CommandRunner`. The first command
that fails raises :class:`~xtaskops.errors.CommandError` and the rest of
the sequence is skipped.

Tasks that take options accept the matching model from
:mod:`xtaskops.config.models`; omitting it runs with the defaults::

    from xtaskops.config.models import CIConfig, PowersetConfig
    from xtaskops.tasks import ci, powerset

    ci()
    ci(CIConfig(nightly=True, clippy_max=False))
    powerset(PowersetConfig(depth=3))
"""

from __future__ import annotations

from pathlib import Path

from xtaskops.config.models import CIConfig, CoverageConfig, PowersetConfig
from xtaskops.infrastructure.filesystem import clean_files, confirm, remove_dir
from xtaskops.infrastructure.process import CommandRunner

CARGO = "cargo"
GRCOV = "grcov"

CLIPPY_MAX_LINTS = (
    "-W",
    "clippy::pedantic",
    "-W",
    "clippy::nursery",
    "-W",
    "rust-2018-idioms",
)

INSTALLABLE_TOOLS = ("cargo-watch", "cargo-hack", "cargo-bloat")


def _runner(runner: CommandRunner | None) -> CommandRunner:
    return runner if runner is not None else CommandRunner()


# ---------------------------------------------------------------------------
# Argument assembly
# ---------------------------------------------------------------------------


def fmt_args(options: CIConfig) -> list[str]:
    """Arguments for the ``cargo fmt`` check."""
    args = ["fmt", "--all", "--", "--check"]
    if options.nightly:
        args.insert(0, "+nightly")
    return args


def clippy_args(options: CIConfig) -> list[str]:
    """Arguments for the ``cargo clippy`` lint pass."""
    args = ["clippy", "--", "-D", "warnings"]
    if options.clippy_max:
        args.extend(CLIPPY_MAX_LINTS)
    return args


def powerset_args(options: PowersetConfig) -> list[str]:
    """Flags shared by every ``cargo hack`` invocation of a powerset run."""
    args = ["--workspace"]
    for name in options.exclude:
        args.extend(["--exclude", name])
    args.extend(["--feature-powerset", "--depth", str(options.depth)])
    if options.exclude_no_default_features:
        args.append("--exclude-no-default-features")
    return args


def coverage_env(options: CoverageConfig) -> dict[str, str]:
    """Environment for an instrumented ``cargo test`` run."""
    return {
        "CARGO_INCREMENTAL": "0",
        "RUSTFLAGS": "-Cinstrument-coverage",
        "LLVM_PROFILE_FILE": options.profile_file,
    }


def coverage_report(options: CoverageConfig, *, devmode: bool) -> tuple[str, str]:
    """Return ``(format, output path)`` for the grcov report."""
    if devmode:
        return "html", f"{options.output_dir}/html"
    return "lcov", f"{options.output_dir}/tests.lcov"


def grcov_args(options: CoverageConfig, *, devmode: bool) -> list[str]:
    """Arguments for the grcov report generator."""
    fmt, output = coverage_report(options, devmode=devmode)
    args = [
        ".",
        "--binary-path",
        options.binary_path,
        "-s",
        ".",
        "-t",
        fmt,
        "--branch",
        "--ignore-not-existing",
    ]
    for pattern in options.ignore:
        args.extend(["--ignore", pattern])
    args.extend(["-o", output])
    return args


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


def docs(*, runner: CommandRunner | None = None) -> None:
    """Run cargo docs in watch mode."""
    _runner(runner).run(CARGO, "watch", "-s", "cargo doc --no-deps")


def ci(options: CIConfig | None = None, *, runner: CommandRunner | None = None) -> None:
    """Run typical CI tasks in series: ``fmt``, ``clippy``, and tests."""
    options = options or CIConfig()
    run = _runner(runner).run
    run(CARGO, *fmt_args(options))
    run(CARGO, *clippy_args(options))
    run(CARGO, "test")
    run(CARGO, "test", "--doc")


def coverage(
    devmode: bool = False,
    options: CoverageConfig | None = None,
    *,
    runner: CommandRunner | None = None,
    interactive: bool = True,
) -> str:
    """Run instrumented tests and build a grcov report.

    Devmode produces an HTML report and offers to open it; otherwise an
    lcov file is written for CI upload. Returns the report path, relative
    to the project root.
    """
    options = options or CoverageConfig()
    runner = _runner(runner)
    root = runner.cwd or Path.cwd()
    out_dir = root / options.output_dir

    if not runner.dry_run:
        remove_dir(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

    runner.echo("=== running coverage ===")
    runner.run(CARGO, "test", env=coverage_env(options))
    runner.echo("ok.")

    runner.echo("=== generating report ===")
    _, report = coverage_report(options, devmode=devmode)
    runner.run(GRCOV, *grcov_args(options, devmode=devmode))
    runner.echo("ok.")

    runner.echo("=== cleaning up ===")
    if not runner.dry_run:
        clean_files(options.profile_glob, root=root)
    runner.echo("ok.")

    if devmode:
        if interactive and confirm("open report folder?"):
            runner.launch(str(root / report))
        else:
            runner.echo(f"report location: {report}")
    return report


def powerset(
    options: PowersetConfig | None = None, *, runner: CommandRunner | None = None
) -> None:
    """Perform a CI build with a powerset of features."""
    options = options or PowersetConfig()
    run = _runner(runner).run
    common = powerset_args(options)
    run(CARGO, "hack", "clippy", *common, "--", "-D", "warnings")
    run(CARGO, "hack", *common, "test")
    run(CARGO, "hack", "test", *common, "--doc")


def bloat_deps(*, runner: CommandRunner | None = None) -> None:
    """Show biggest crates in release build."""
    _runner(runner).run(CARGO, "bloat", "--release", "--crates")


def bloat_time(*, runner: CommandRunner | None = None) -> None:
    """Show crate build times."""
    _runner(runner).run(CARGO, "bloat", "--time", "-j", "1")


def dev(*, runner: CommandRunner | None = None) -> None:
    """Watch changes and after every change: ``cargo check``, then ``cargo test``.

    If ``cargo check`` fails, tests will not run.
    """
    _runner(runner).run(CARGO, "watch", "-x", "check", "-x", "test")


def install(*, runner: CommandRunner | None = None) -> None:
    """Install the cargo tools the other tasks rely on."""
    run = _runner(runner).run
    for tool in INSTALLABLE_TOOLS:
        run(CARGO, "install", tool)
