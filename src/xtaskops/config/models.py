"""Pydantic option models with code-baked defaults.

Each model doubles as an ``xtask.toml`` section and as the explicit
options object a task function accepts::

    from xtaskops.tasks import ci
    ci(CIConfig(nightly=True))

Sparse TOML contract: defaults baked here, ``xtask.toml`` only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CIConfig(BaseModel):
    """[ci] section."""

    model_config = {"frozen": True}

    # Run the formatting check with the nightly toolchain.
    nightly: bool = False
    # Turn all clippy lints on: pedantic, nursery, 2018-idioms.
    clippy_max: bool = True


class PowersetConfig(BaseModel):
    """[powerset] section."""

    model_config = {"frozen": True}

    depth: int = Field(default=2, ge=1)
    # Don't run with no features at all.
    exclude_no_default_features: bool = False
    exclude: list[str] = Field(default_factory=lambda: ["xtask"])


class CoverageConfig(BaseModel):
    """[coverage] section."""

    model_config = {"frozen": True}

    output_dir: str = "coverage"
    binary_path: str = "./target/debug/deps"
    profile_file: str = "cargo-test-%p-%m.profraw"
    profile_glob: str = "**/*.profraw"
    ignore: list[str] = Field(
        default_factory=lambda: ["../*", "/*", "xtask/*", "*/src/tests/*"]
    )


class XtaskConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    ci: CIConfig = Field(default_factory=CIConfig)
    powerset: PowersetConfig = Field(default_factory=PowersetConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
