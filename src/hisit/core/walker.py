"""Directory walker — depth-limited pre-order traversal with an age check."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from hisit.core.errors import WalkError

if TYPE_CHECKING:
    import structlog


@dataclass(frozen=True)
class RecentDir:
    """A directory whose modification time falls inside the recency window."""

    path: Path
    depth: int
    modified: datetime
    age: timedelta


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _list_dir(directory: Path) -> Iterator[os.DirEntry[str]]:
    """Return an iterator over *directory*'s entries in name order.

    The listing is fully read before returning so the directory handle is
    closed while the caller descends.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise WalkError(directory, _reason(exc)) from exc
    return iter(entries)


def scan_directories(
    base_path: Path,
    age: timedelta,
    depth: int,
    *,
    logger: structlog.stdlib.BoundLogger,
    now: datetime | None = None,
) -> list[RecentDir]:
    """Walk *base_path* and report directories modified within *age*.

    Parameters
    ----------
    base_path:
        Absolute directory to scan.  Never reported itself.
    age:
        Width of the recency window; a directory matches when
        ``now - mtime <= age``.
    depth:
        Deepest level processed, counted in path segments below
        *base_path*.  Directories at *depth* are checked but not entered.
        Negative values are treated as ``1``.
    logger:
        Receives one INFO record per match.
    now:
        Reference time; sampled once when omitted.

    Returns
    -------
    Matches in traversal order (pre-order, siblings sorted by name).

    Raises
    ------
    WalkError
        On the first entry that cannot be read.  Matches already logged
        stay logged; nothing after the failing entry is visited.
    """
    if depth < 0:
        logger.warning("negative depth, scanning immediate children only", depth=depth)
        depth = 1
    if now is None:
        now = datetime.now(timezone.utc)

    base = Path(base_path)
    try:
        base_stat = base.stat()
    except OSError as exc:
        raise WalkError(base, _reason(exc)) from exc
    if not stat.S_ISDIR(base_stat.st_mode):
        raise WalkError(base, "not a directory")

    matches: list[RecentDir] = []
    if depth == 0:
        return matches

    # One open listing per level; len(stack) is the depth of the entries
    # the top iterator yields.
    stack = [_list_dir(base)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        level = len(stack)
        path = Path(entry.path)
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as exc:
            raise WalkError(path, _reason(exc)) from exc

        if not stat.S_ISDIR(st.st_mode):
            continue

        modified = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
        elapsed = now - modified
        if elapsed <= age:
            matches.append(RecentDir(path=path, depth=level, modified=modified, age=elapsed))
            logger.info(
                "modified directory found",
                directory=path,
                depth=level,
                modified=modified.isoformat(),
                age=elapsed,
            )
        else:
            logger.debug("directory outside window", directory=path, age=elapsed)

        if level < depth:
            stack.append(_list_dir(path))

    return matches
