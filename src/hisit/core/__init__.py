"""Scan engine: age parsing, path resolution, directory walking."""

from hisit.core.age import parse_age
from hisit.core.config import ScanOptions
from hisit.core.errors import (
    AgeFormatError,
    AgeRangeError,
    HisitError,
    LoggerConfigError,
    PathResolutionError,
    UnsupportedUnitError,
    WalkError,
)
from hisit.core.paths import expand_path
from hisit.core.walker import RecentDir, scan_directories

__all__ = [
    "parse_age",
    "expand_path",
    "scan_directories",
    "RecentDir",
    "ScanOptions",
    # Errors
    "HisitError",
    "AgeFormatError",
    "AgeRangeError",
    "UnsupportedUnitError",
    "PathResolutionError",
    "WalkError",
    "LoggerConfigError",
]
