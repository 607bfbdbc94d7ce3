from __future__ import annotations

from fractions import Fraction

from .add import add, sub
from .angle import AngleMeasure
from .constant import Constant
from .errors import BadTan, Complex
from .expr import ONE, ZERO, Acos, Asin, Atan, Const, Cos, Expr, Num, Sin, Tan, is_negative, rational
from .mul import div, mul
from .power import inv, neg, rem, sqrt

QUARTER = Fraction(1, 4)
HALF_TURN = Fraction(1, 2)


def full_turn(unit: AngleMeasure) -> Expr:
    count = Num(unit.turn_count)
    if unit.uses_pi:
        return mul(count, Const(Constant.PI))
    return count


def into_turns(angle: Expr, unit: AngleMeasure) -> Expr:
    return div(angle, full_turn(unit))


def turns_to(turns: Expr, unit: AngleMeasure) -> Expr:
    return mul(turns, full_turn(unit))


def convert_angle(angle: Expr, old: AngleMeasure, new: AngleMeasure) -> Expr:
    return turns_to(into_turns(angle, old), new)


def _sqrt2_over_2() -> Expr:
    return div(sqrt(rational(2)), rational(2))


def _sqrt3_over_2() -> Expr:
    return div(sqrt(rational(3)), rational(2))


def _turns(angle: Expr, unit: AngleMeasure, period: Fraction):
    reduced = rem(into_turns(angle, unit), Num(period))
    if isinstance(reduced, Num):
        return reduced.value
    return None


def generic_sin(angle: Expr, unit: AngleMeasure) -> Expr:
    """Sine of ``angle`` measured in ``unit``, exact on multiples of 1/12 and 1/8 turn."""
    if is_negative(angle):
        return neg(generic_sin(neg(angle), unit))
    turns = _turns(angle, unit, Fraction(1))
    if turns is None:
        return Sin(angle, unit)
    if turns < 0:
        return neg(generic_sin(turns_to(Num(-turns), unit), unit))
    if turns >= HALF_TURN:
        return neg(generic_sin(turns_to(Num(turns - HALF_TURN), unit), unit))
    if turns > QUARTER:
        return generic_sin(turns_to(Num(HALF_TURN - turns), unit), unit)

    if turns == 0:
        return ZERO
    if turns == QUARTER:
        return ONE
    if turns == Fraction(1, 8):
        return _sqrt2_over_2()
    if turns == Fraction(1, 6):
        return _sqrt3_over_2()
    if turns == Fraction(1, 12):
        return rational(1, 2)
    return Sin(turns_to(Num(turns), unit), unit)


def generic_cos(angle: Expr, unit: AngleMeasure) -> Expr:
    if is_negative(angle):
        return generic_cos(neg(angle), unit)
    turns = _turns(angle, unit, Fraction(1))
    if turns is None:
        return Cos(angle, unit)
    if turns < 0:
        return generic_cos(turns_to(Num(-turns), unit), unit)
    if turns > HALF_TURN:
        return generic_cos(turns_to(Num(1 - turns), unit), unit)
    if turns > QUARTER:
        return neg(generic_cos(turns_to(Num(HALF_TURN - turns), unit), unit))

    if turns == 0:
        return ONE
    if turns == QUARTER:
        return ZERO
    if turns == Fraction(1, 8):
        return _sqrt2_over_2()
    if turns == Fraction(1, 6):
        return rational(1, 2)
    if turns == Fraction(1, 12):
        return _sqrt3_over_2()
    return Cos(turns_to(Num(turns), unit), unit)


def generic_tan(angle: Expr, unit: AngleMeasure) -> Expr:
    """Tangent of ``angle``; raises :class:`BadTan` on an odd number of quarter turns."""
    if is_negative(angle):
        return neg(generic_tan(neg(angle), unit))
    turns = _turns(angle, unit, HALF_TURN)
    if turns is None:
        return Tan(angle, unit)
    if turns < 0:
        return neg(generic_tan(turns_to(Num(-turns), unit), unit))
    if turns == QUARTER:
        raise BadTan(f"{turns} turn")
    if turns > QUARTER:
        return neg(generic_tan(turns_to(Num(HALF_TURN - turns), unit), unit))

    three = rational(3)
    if turns == 0:
        return ZERO
    if turns == Fraction(1, 24):
        return sub(rational(2), sqrt(three))
    if turns == Fraction(1, 12):
        return div(sqrt(three), three)
    if turns == Fraction(1, 8):
        return ONE
    if turns == Fraction(1, 6):
        return sqrt(three)
    if turns == Fraction(5, 24):
        return add(rational(2), sqrt(three))
    return Tan(turns_to(Num(turns), unit), unit)


def _check_unit_interval(value: Expr) -> None:
    if isinstance(value, Num) and abs(value.value) > 1:
        raise Complex(f"{value.value} is outside [-1, 1]")


def asin(value: Expr, unit: AngleMeasure) -> Expr:
    """Inverse sine, as an angle in ``unit``; exact on the values :func:`generic_sin` produces."""
    _check_unit_interval(value)
    if is_negative(value):
        return neg(asin(neg(value), unit))
    if value.is_zero():
        return turns_to(ZERO, unit)
    if value == rational(1, 2):
        return turns_to(rational(1, 12), unit)
    if value in (_sqrt2_over_2(), inv(sqrt(rational(2)))):
        return turns_to(rational(1, 8), unit)
    if value == _sqrt3_over_2():
        return turns_to(rational(1, 6), unit)
    if value.is_one():
        return turns_to(rational(1, 4), unit)
    return Asin(value, unit)


def acos(value: Expr, unit: AngleMeasure) -> Expr:
    _check_unit_interval(value)
    if is_negative(value):
        return sub(turns_to(rational(1, 2), unit), acos(neg(value), unit))
    if value.is_zero():
        return turns_to(rational(1, 4), unit)
    if value == rational(1, 2):
        return turns_to(rational(1, 6), unit)
    if value in (_sqrt2_over_2(), inv(sqrt(rational(2)))):
        return turns_to(rational(1, 8), unit)
    if value == _sqrt3_over_2():
        return turns_to(rational(1, 12), unit)
    if value.is_one():
        return turns_to(ZERO, unit)
    return Acos(value, unit)


def atan(value: Expr, unit: AngleMeasure) -> Expr:
    if is_negative(value):
        return neg(atan(neg(value), unit))
    three = rational(3)
    if value.is_zero():
        return turns_to(ZERO, unit)
    if value == sub(rational(2), sqrt(three)):
        return turns_to(rational(1, 24), unit)
    if value in (div(sqrt(three), three), inv(sqrt(three))):
        return turns_to(rational(1, 12), unit)
    if value.is_one():
        return turns_to(rational(1, 8), unit)
    if value == sqrt(three):
        return turns_to(rational(1, 6), unit)
    if value == add(rational(2), sqrt(three)):
        return turns_to(rational(5, 24), unit)
    return Atan(value, unit)

