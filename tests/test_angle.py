import math
from fractions import Fraction

import pytest

from guac.angle import AngleMeasure, convert_angle_f64
from guac.constant import Constant
from guac.errors import BadInput
from guac.expr import Const, Num
from guac.trig import convert_angle, full_turn


def test_parse_symbols():
    assert AngleMeasure.parse("deg") is AngleMeasure.DEGREE
    assert AngleMeasure.parse("rad") is AngleMeasure.RADIAN
    assert str(AngleMeasure.GRADIAN) == "grad"
    with pytest.raises(BadInput):
        AngleMeasure.parse("furlong")


def test_full_turns():
    assert AngleMeasure.DEGREE.full_turn_f64() == 360
    assert AngleMeasure.RADIAN.full_turn_f64() == pytest.approx(math.tau)
    assert full_turn(AngleMeasure.NATO_MIL) == Num(6400)
    assert AngleMeasure.RADIAN.uses_pi
    assert not AngleMeasure.TURN.uses_pi


def test_convert_angle_exact():
    assert convert_angle(Num(90), AngleMeasure.DEGREE, AngleMeasure.TURN) == Num(Fraction(1, 4))
    assert convert_angle(Num(180), AngleMeasure.DEGREE, AngleMeasure.RADIAN) == Const(Constant.PI)
    assert convert_angle(Num(100), AngleMeasure.GRADIAN, AngleMeasure.DEGREE) == Num(90)


@pytest.mark.parametrize("unit", list(AngleMeasure))
def test_convert_angle_round_trip(unit):
    angle = Num(45)
    there = convert_angle(angle, AngleMeasure.DEGREE, unit)
    assert convert_angle(there, unit, AngleMeasure.DEGREE) == angle


def test_convert_angle_f64():
    assert convert_angle_f64(180, AngleMeasure.DEGREE, AngleMeasure.RADIAN) == pytest.approx(math.pi)
    assert convert_angle_f64(1, AngleMeasure.TURN, AngleMeasure.HOUR_ANGLE) == pytest.approx(24)


def test_constants():
    assert Constant.parse("pi") is Constant.PI
    assert Constant.parse("π") is Constant.PI
    assert Constant.parse("hbar") is Constant.HBAR
    assert str(Constant.HBAR) == "ħ"
    assert Constant.TAU.to_f64() == pytest.approx(2 * Constant.PI.to_f64())
    with pytest.raises(BadInput):
        Constant.parse("nope")
