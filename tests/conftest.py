"""Shared fixtures."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

import pytest

from hisit.utils.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_hisit_logger():
    """Detach handlers that ``build_logger`` wired to a captured stream."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _set_mtime(path: Path, seconds_ago: float, *, now: float | None = None) -> None:
    ref = time.time() if now is None else now
    t = ref - seconds_ago
    os.utime(path, (t, t))


@pytest.fixture
def set_mtime():
    """Backdate a path: ``set_mtime(path, seconds_ago, now=None)``."""
    return _set_mtime
