"""Structured logging on structlog, routed through stdlib ``logging``.

Modules get a bound logger with :func:`get_logger` and pass fields as
key-values::

    log = get_logger(__name__)
    log.info("modified directory found", directory=path, depth=1)

:func:`build_logger` attaches the one handler that renders records for a
run, either as logfmt text::

    time=2026-01-01T12:00:00.000000Z level=info msg="modified directory found" depth=1 directory=/srv/x

or as one JSON object per line::

    {"depth":1,"directory":"/srv/x","level":"info","msg":"modified directory found","time":"..."}
"""

from __future__ import annotations

import functools
import logging
import sys
from typing import IO

import structlog

from hisit.core.errors import LoggerConfigError
from hisit.utils.json_norm import stable_json_dumps

LOGGER_NAME = "hisit"

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

FORMATS = ("text", "json")

# Applied at the call site, before the record reaches stdlib logging.
_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True, key="time"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.EventRenamer("msg"),
]

# Records from plain ``logging`` calls under the ``hisit`` logger.
_FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True, key="time"),
    structlog.processors.format_exc_info,
    structlog.processors.EventRenamer("msg"),
]


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def resolve_level(level: str) -> int:
    """Map a level name (case-insensitive) to a ``logging`` level."""
    try:
        return LEVELS[level.strip().lower()]
    except KeyError:
        raise LoggerConfigError(
            f"unknown log level {level!r} (choose from debug, info, warn, error)"
        ) from None


def _renderer(fmt: str):
    if fmt == "json":
        return structlog.processors.JSONRenderer(
            serializer=functools.partial(stable_json_dumps, indent=None, newline=False)
        )
    return structlog.processors.LogfmtRenderer(key_order=["time", "level", "msg"])


def build_logger(
    level: str,
    fmt: str,
    *,
    stream: IO[str] | None = None,
) -> structlog.stdlib.BoundLogger:
    """Wire the ``hisit`` stdlib logger to one rendering handler.

    Calling this again replaces the previous handler, so repeated runs in
    one process do not duplicate output.  The logger does not propagate to
    the root logger.

    Raises
    ------
    LoggerConfigError
        For an unknown level or format.
    """
    levelno = resolve_level(level)
    fmt_key = fmt.strip().lower()
    if fmt_key not in FORMATS:
        raise LoggerConfigError(f"unknown log format {fmt!r} (choose from text, json)")

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(fmt_key),
            ],
            foreign_pre_chain=_FOREIGN_PRE_CHAIN,
        )
    )

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for old in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(old)
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(levelno)
    stdlib_logger.propagate = False
    return get_logger(LOGGER_NAME)
