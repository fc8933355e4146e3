"""Locate and load ``xtask.toml``.

The file is looked up next to the working directory and then in each
parent, the same way cargo finds ``Cargo.toml``. ``XTASK_CONFIG`` pins an
explicit file and disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from xtaskops.config.models import XtaskConfig
from xtaskops.infrastructure.filesystem import ancestors

CONFIG_FILENAME = "xtask.toml"
CONFIG_ENV_VAR = "XTASK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``xtask.toml`` governing *start* (default: cwd), if any."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    for directory in ancestors(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> XtaskConfig:
    """Validate the sections of *path* (discovered from *cwd* when omitted).

    No file means all defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return XtaskConfig()
    return XtaskConfig.model_validate(tomllib.loads(path.read_text(encoding="utf-8")))
