"""CLI entry-point for hisit.

Usage:
    python -m hisit
    python -m hisit -dir /srv/data -age 6h -depth 3
    python -m hisit --dir . --age 30m --log-format json
    python -m hisit -log-level debug -age -1d

Flags accept one or two leading dashes, and ``-flag value`` or
``-flag=value``.  A value is always taken from the next argument, even
when it starts with a dash.  Log lines go to stderr.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import asdict

from hisit import __version__
from hisit.api import find_recent_dirs
from hisit.core.config import (
    DEFAULT_AGE,
    DEFAULT_DEPTH,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ScanOptions,
)
from hisit.core.errors import HisitError, LoggerConfigError
from hisit.utils.exit_codes import ExitCode
from hisit.utils.log import build_logger

# Options that take a value, by long name.
_VALUE_OPTIONS = ("log-level", "log-format", "dir", "age", "depth")
_VALUE_FLAGS = frozenset(f"{dash}{name}" for name in _VALUE_OPTIONS for dash in ("-", "--"))


def _attach_values(argv: list[str]) -> list[str]:
    """Rewrite ``-age -1d`` as ``-age=-1d``.

    argparse refuses a separate value that starts with a dash; joining it to
    its flag makes it unambiguous.
    """
    out: list[str] = []
    tokens = iter(argv)
    for tok in tokens:
        if tok in _VALUE_FLAGS:
            value = next(tokens, None)
            if value is not None:
                tok = f"{tok}={value}"
        out.append(tok)
    return out


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hisit",
        description="Report directories modified within a recent time window.",
        epilog="Values starting with a dash work in either form: -age -1d or -age=-1d.",
        allow_abbrev=False,
    )
    p.add_argument(
        "-log-level",
        "--log-level",
        dest="log_level",
        default=DEFAULT_LOG_LEVEL,
        metavar="LEVEL",
        help="Minimum severity to emit: debug, info, warn, error (default: info).",
    )
    p.add_argument(
        "-log-format",
        "--log-format",
        dest="log_format",
        default=DEFAULT_LOG_FORMAT,
        metavar="FORMAT",
        help="Log line encoding: text or json (default: text).",
    )
    p.add_argument(
        "-dir",
        "--dir",
        dest="base_dir",
        default="",
        metavar="PATH",
        help="Base directory to scan (default: current directory).",
    )
    p.add_argument(
        "-age",
        "--age",
        dest="age",
        default=DEFAULT_AGE,
        help=(
            "Recency window as <integer><s|m|h|d>, e.g. 30m or 1d (default: 1d). "
            "Negative values are allowed: -age -1d."
        ),
    )
    p.add_argument(
        "-depth",
        "--depth",
        dest="depth",
        type=int,
        default=DEFAULT_DEPTH,
        help="Maximum traversal depth below the base directory (default: 2).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = success, 1 = any failure)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]
    args = _build_parser().parse_args(_attach_values(effective_argv))
    options = ScanOptions.from_namespace(args)

    try:
        logger = build_logger(options.log_level, options.log_format)
    except LoggerConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    logger.debug("options", **asdict(options))

    try:
        matches = find_recent_dirs(
            options.base_dir,
            age=options.age,
            depth=options.depth,
            logger=logger,
        )
    except HisitError as exc:
        logger.error("run failed", error=str(exc))
        return ExitCode.ERROR

    logger.debug("scan complete", matches=len(matches))
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
