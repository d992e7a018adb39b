"""Run configuration dataclass."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_FORMAT = "text"
DEFAULT_AGE = "1d"
DEFAULT_DEPTH = 2


@dataclass(frozen=True)
class ScanOptions:
    """Immutable options for one run.

    Values are stored exactly as given on the command line; validation
    happens in the component that consumes each one (logger factory, path
    resolver, age parser, walker).
    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT     # text | json
    base_dir: str = ""                       # "" → current directory
    age: str = DEFAULT_AGE
    depth: int = DEFAULT_DEPTH

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> ScanOptions:
        return cls(
            log_level=ns.log_level,
            log_format=ns.log_format,
            base_dir=ns.base_dir,
            age=ns.age,
            depth=ns.depth,
        )
