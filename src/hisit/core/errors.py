"""Error taxonomy.

Every failure the CLI can report derives from :class:`HisitError`.  Inner
components raise; only ``hisit.__main__.main`` turns an error into an exit
code.
"""

from __future__ import annotations

from pathlib import Path


class HisitError(Exception):
    """Base class for all expected run failures."""


class AgeFormatError(HisitError, ValueError):
    """Raised when the magnitude of an age expression is not an integer."""

    def __init__(self, age: str) -> None:
        self.age = age
        super().__init__(f"invalid age expression {age!r}: expected <integer><unit>")


class UnsupportedUnitError(HisitError, ValueError):
    """Raised when an age expression ends in an unknown unit suffix."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"unsupported time unit: {unit}")


class AgeRangeError(HisitError, ValueError):
    """Raised when an age expression is too large to represent as a duration."""

    def __init__(self, age: str) -> None:
        self.age = age
        super().__init__(f"age expression {age!r} is out of range")


class PathResolutionError(HisitError):
    """Raised when the base directory cannot be made absolute."""


class WalkError(HisitError):
    """Raised when reading an entry fails during traversal."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")


class LoggerConfigError(HisitError, ValueError):
    """Raised for an unknown log level or log format."""
