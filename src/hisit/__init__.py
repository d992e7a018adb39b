"""hisit — list directories modified within a recent time window."""

from hisit.api import find_recent_dirs
from hisit.core.walker import RecentDir

__all__ = [
    "__version__",
    "find_recent_dirs",
    "RecentDir",
]
__version__ = "0.1.0"
