"""Infrastructure layer — process spawning and filesystem helpers."""

from xtaskops.infrastructure.process import CommandRunner, Invocation

__all__ = ["CommandRunner", "Invocation"]
