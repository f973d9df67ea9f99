"""Dice notation parser and roller — pure math, no I/O."""
from __future__ import annotations

import logging
import random
import re

from dice_roller.models.roll import RollResult, RollSpec

logger = logging.getLogger(__name__)

# Pattern: N, dS, NdS. Repeated 'd' collapses away when splitting.
_NOTATION_RE = re.compile(r"^\d*d*\d*$")

MAX_COUNT = 65535
MAX_SIDES = 255


class DiceNotationError(ValueError):
    def __init__(self, notation: str, message: str):
        super().__init__(message)
        self.notation = notation


class InvalidFormatError(DiceNotationError):
    def __init__(self, notation: str):
        super().__init__(notation, f"Invalid dice roll definition: {notation!r}")


class InvalidNumberError(DiceNotationError):
    def __init__(self, notation: str, segment: str):
        super().__init__(notation, f"Invalid number {segment!r} in dice roll definition: {notation!r}")
        self.segment = segment


class DiceRangeError(InvalidNumberError):
    def __init__(self, notation: str, segment: str, what: str, limit: int):
        DiceNotationError.__init__(
            self,
            notation,
            f"{what.capitalize()} must be between 1 and {limit}, got {segment} in {notation!r}",
        )
        self.segment = segment
        self.limit = limit


def _to_int(notation: str, segment: str, what: str, limit: int) -> int:
    # \d also matches non-ASCII digits; only 0-9 count as numbers.
    if not segment.isascii():
        raise InvalidNumberError(notation, segment)
    try:
        value = int(segment)
    except ValueError:
        raise InvalidNumberError(notation, segment) from None
    if not 1 <= value <= limit:
        raise DiceRangeError(notation, segment, what, limit)
    return value


def parse(notation: str, max_count: int = MAX_COUNT, max_sides: int = MAX_SIDES) -> RollSpec:
    """Parse notation like '1d20', '4d6', 'd6' or '8' into a RollSpec.

    Raises InvalidFormatError when the text is not dice notation (including
    degenerate input such as '' or 'dd'), InvalidNumberError when a segment
    is not an integer, and DiceRangeError when a number is out of range.
    """
    text = notation.strip()
    if not _NOTATION_RE.match(text):
        logger.debug("Rejected dice notation %r", notation)
        raise InvalidFormatError(notation)

    parts = [part for part in text.split("d") if part]
    if len(parts) == 1:
        count, sides = "1", parts[0]
    elif len(parts) == 2:
        count, sides = parts
    else:
        logger.debug("Dice notation %r has %d numeric segments", notation, len(parts))
        raise InvalidFormatError(notation)

    return RollSpec(
        count=_to_int(notation, count, "dice count", max_count),
        sides=_to_int(notation, sides, "die size", max_sides),
    )


def roll(spec: RollSpec) -> RollResult:
    """Roll spec.count dice, each uniform in [1, spec.sides]."""
    rolls = [random.randint(1, spec.sides) for _ in range(spec.count)]
    logger.debug("Rolled %s: %s", spec, rolls)
    return RollResult(spec=spec, rolls=rolls)


def roll_notation(notation: str, max_count: int = MAX_COUNT, max_sides: int = MAX_SIDES) -> RollResult:
    """Convenience: parse then roll."""
    return roll(parse(notation, max_count=max_count, max_sides=max_sides))
