"""Base-directory resolution."""

from __future__ import annotations

import os
from pathlib import Path

from hisit.core.errors import PathResolutionError


def expand_path(path: str | Path) -> Path:
    """Return *path* as an absolute path against the current directory.

    Resolution is lexical: ``..`` segments are collapsed but symlinks are
    left alone.  An empty string resolves to the current directory.
    """
    try:
        if "\x00" in str(path):
            raise ValueError("embedded null byte")
        return Path(os.path.abspath(path or os.curdir))
    except (OSError, ValueError) as exc:
        raise PathResolutionError(f"cannot resolve {str(path)!r}: {exc}") from exc
