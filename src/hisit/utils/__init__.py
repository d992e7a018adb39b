"""Shared utilities for hisit."""

from hisit.utils.exit_codes import ExitCode
from hisit.utils.json_norm import stable_json_dumps
from hisit.utils.log import build_logger, get_logger

__all__ = [
    "ExitCode",
    "stable_json_dumps",
    "build_logger",
    "get_logger",
]
