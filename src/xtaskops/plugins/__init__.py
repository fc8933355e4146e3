"""Extension layer — custom xtasks via pluggy.

Discovery: entry_points (pip-installed) plus ``.xtask/plugins/*.py``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from xtaskops.plugins.manager import PluginManager

__all__ = ["PluginManager"]
