"""
hisit.api
=========

Programmatic entrypoint: the CLI pipeline without argparse.

Usage::

    from hisit.api import find_recent_dirs

    for hit in find_recent_dirs("/srv/data", age="6h", depth=3):
        print(hit.path, hit.age)
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import structlog

from hisit.core.age import parse_age
from hisit.core.config import DEFAULT_AGE, DEFAULT_DEPTH
from hisit.core.paths import expand_path
from hisit.core.walker import RecentDir, scan_directories
from hisit.utils.log import get_logger

_logger = get_logger(__name__)


def find_recent_dirs(
    base_dir: str | Path = "",
    *,
    age: str = DEFAULT_AGE,
    depth: int = DEFAULT_DEPTH,
    logger: structlog.stdlib.BoundLogger | None = None,
    now: datetime | None = None,
) -> list[RecentDir]:
    """Resolve *base_dir*, parse *age* and walk the tree.

    Raises the first :class:`~hisit.core.errors.HisitError` encountered;
    nothing is scanned when the path or the age expression is invalid.
    """
    log = logger if logger is not None else _logger
    base_path = expand_path(base_dir)
    window = parse_age(age, logger=log)
    log.debug("scan starting", directory=base_path, age=window, depth=depth)
    return scan_directories(base_path, window, depth, logger=log, now=now)
