"""Age expressions — ``"30m"``, ``"2h"``, ``"1d"`` → ``timedelta``."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import TYPE_CHECKING

from hisit.core.errors import AgeFormatError, AgeRangeError, UnsupportedUnitError

if TYPE_CHECKING:
    import structlog

# Seconds per unit suffix.
UNITS: dict[str, int] = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
}

_MAGNITUDE = re.compile(r"[+-]?[0-9]+")


def parse_age(
    age: str,
    *,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> timedelta:
    """Parse an age expression into a duration.

    The last character is the unit, everything before it is a signed
    base-10 integer.  The magnitude is checked first, so ``"abcx"`` is a
    format error while ``"5x"`` is an unsupported unit.

    Zero and negative magnitudes are accepted as-is.

    Raises
    ------
    AgeFormatError
        If the magnitude is empty or not an integer.
    UnsupportedUnitError
        If the unit is not one of ``s``, ``m``, ``h``, ``d``.
    AgeRangeError
        If the duration exceeds what ``timedelta`` can hold
        (about 2.7 million years either way).
    """
    magnitude, unit = age[:-1], age[-1:]
    if not _MAGNITUDE.fullmatch(magnitude):
        raise AgeFormatError(age)
    value = int(magnitude)

    if logger is not None:
        logger.debug("parse age", age=age, unit=unit, value=value)

    try:
        seconds = UNITS[unit]
    except KeyError:
        raise UnsupportedUnitError(unit) from None
    try:
        return timedelta(seconds=value * seconds)
    except OverflowError as exc:
        raise AgeRangeError(age) from exc
