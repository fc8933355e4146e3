"""xtaskops — common tasks and operations for running a cargo repo with xtask."""

from xtaskops.config.models import CIConfig, CoverageConfig, PowersetConfig
from xtaskops.errors import CommandError, CommandNotFoundError, XtaskError

__version__ = "0.4.0"

__all__ = [
    "CIConfig",
    "CommandError",
    "CommandNotFoundError",
    "CoverageConfig",
    "PowersetConfig",
    "XtaskError",
    "__version__",
]
