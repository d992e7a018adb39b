"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — walk completed
  1   Error — invalid age, unresolvable path, walk failure, bad log config
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
