from __future__ import annotations

import math
from enum import Enum
from fractions import Fraction

from .errors import BadInput


class AngleMeasure(Enum):
    """A unit of angle, named by its display symbol.

    Every unit is defined by how many of it make one full turn; for radians
    that count is ``2π``, for everything else it is rational.
    """

    RADIAN = "rad"
    TURN = "turn"
    GRADIAN = "grad"
    DEGREE = "deg"
    MINUTE = "min"
    SECOND = "sec"
    HALF_TURN = "mulπ"
    QUADRANT = "quad"
    SEXTANT = "sext"
    HEXACONTADE = "hexacontade"
    BINARY_DEGREE = "bdeg"
    HOUR_ANGLE = "hour"
    POINT = "point"
    NATO_MIL = "mil"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def turn_count(self) -> Fraction:
        """Rational part of the full-turn size; radians multiply it by π."""
        return _TURN_COUNTS[self]

    @property
    def uses_pi(self) -> bool:
        return self is AngleMeasure.RADIAN

    def full_turn_f64(self) -> float:
        count = float(self.turn_count)
        return count * math.pi if self.uses_pi else count

    @classmethod
    def parse(cls, text: str) -> "AngleMeasure":
        try:
            return cls(text)
        except ValueError:
            raise BadInput(f"unknown angle measure {text!r}") from None

    def __str__(self) -> str:
        return self.value


_TURN_COUNTS = {
    AngleMeasure.RADIAN: Fraction(2),
    AngleMeasure.TURN: Fraction(1),
    AngleMeasure.GRADIAN: Fraction(400),
    AngleMeasure.DEGREE: Fraction(360),
    AngleMeasure.MINUTE: Fraction(21600),
    AngleMeasure.SECOND: Fraction(1296000),
    AngleMeasure.HALF_TURN: Fraction(2),
    AngleMeasure.QUADRANT: Fraction(4),
    AngleMeasure.SEXTANT: Fraction(6),
    AngleMeasure.HEXACONTADE: Fraction(60),
    AngleMeasure.BINARY_DEGREE: Fraction(256),
    AngleMeasure.HOUR_ANGLE: Fraction(24),
    AngleMeasure.POINT: Fraction(32),
    AngleMeasure.NATO_MIL: Fraction(6400),
}


def convert_angle_f64(angle: float, old: AngleMeasure, new: AngleMeasure) -> float:
    return angle / old.full_turn_f64() * new.full_turn_f64()
