"""Filesystem helpers used by tasks.

All paths are resolved against the caller's working directory unless a
root is passed explicitly. Failures propagate as :class:`OSError`.
"""

from __future__ import annotations

import logging
import shutil
import tomllib
from collections.abc import Iterator
from pathlib import Path

import click

logger = logging.getLogger(__name__)

CARGO_MANIFEST = "Cargo.toml"


def remove_dir(path: str | Path) -> None:
    """Recursively delete *path*. A missing directory is not an error."""
    target = Path(path)
    if not target.exists():
        return
    shutil.rmtree(target)
    logger.debug("Removed directory %s", target)


def clean_files(pattern: str, root: Path | None = None) -> list[Path]:
    """Delete every file under *root* (default: cwd) matching a glob pattern.

    ``**`` matches any number of directories, so ``**/*.profraw`` also
    catches files directly in *root*. Returns the removed paths.
    """
    base = root or Path.cwd()
    removed: list[Path] = []
    for path in sorted(base.glob(pattern)):
        if not path.is_file():
            continue
        path.unlink()
        removed.append(path)
    logger.debug("Removed %d file(s) matching %s", len(removed), pattern)
    return removed


def confirm(question: str, *, default: bool = False) -> bool:
    """Ask a yes/no question on stderr.

    End of input (or an interrupt) at the prompt counts as no.
    """
    try:
        return click.confirm(question, default=default, err=True)
    except click.Abort:
        return False


def ancestors(start: Path | None = None) -> Iterator[Path]:
    """Yield *start* (default: cwd, resolved) and then each of its parents."""
    origin = (start or Path.cwd()).resolve()
    yield origin
    yield from origin.parents


def _is_workspace_manifest(manifest: Path) -> bool:
    try:
        data = tomllib.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("Unreadable manifest %s: %s", manifest, exc)
        return False
    return "workspace" in data


def root_dir(start: Path | None = None) -> Path:
    """Return the project root that tasks run in.

    Walks up from *start* (default: cwd). The nearest ``Cargo.toml`` with a
    ``[workspace]`` table wins; otherwise the nearest ``Cargo.toml`` of any
    kind; otherwise *start* itself.
    """
    nearest: Path | None = None
    for directory in ancestors(start):
        manifest = directory / CARGO_MANIFEST
        if not manifest.is_file():
            continue
        if _is_workspace_manifest(manifest):
            return directory
        if nearest is None:
            nearest = directory
    return nearest or (start or Path.cwd()).resolve()
