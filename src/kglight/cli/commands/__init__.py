"""
CLI Commands Package.

Each command is implemented in its own module.
"""

from . import graph
from . import initialize
from . import options
from . import stats

__all__ = [
    "graph",
    "initialize",
    "options",
    "stats",
]
