from fractions import Fraction

import pytest

from guac.angle import AngleMeasure
from guac.constant import Constant
from guac.expr import (
    ONE,
    ZERO,
    Const,
    Log,
    Mod,
    Num,
    Power,
    Product,
    Sin,
    Sum,
    Var,
    complexity,
    contains_var,
    correct,
    rational,
)

x = Var("x")
y = Var("y")


def test_num_coerces_to_fraction():
    assert Num(3).value == Fraction(3)
    assert Num(3) == Num(Fraction(6, 2))
    with pytest.raises(TypeError):
        Num(1.5)


def test_sum_and_product_ignore_order():
    assert Sum((x, y)) == Sum((y, x))
    assert Product((Num(2), x)) == Product((x, Num(2)))
    assert hash(Sum((x, y))) == hash(Sum((y, x)))
    assert Sum((x, x)) != Sum((x, y))


@pytest.mark.parametrize(
    "raw, expected",
    [
        (Sum(()), ZERO),
        (Sum((x,)), x),
        (Sum((x, ZERO, y)), Sum((x, y))),
        (Product(()), ONE),
        (Product((Num(2), Num(3), x)), Product((Num(6), x))),
        (Product((Num(2), x, ZERO)), ZERO),
        (Product((Num(2), Num(Fraction(1, 2)), x)), x),
        (Power(x, ONE), x),
        (Power(x, ZERO), ONE),
        (Power(Sum((x,)), Product((Num(2),))), Power(x, Num(2))),
    ],
)
def test_correct(raw, expected):
    assert correct(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        Sum((x, ZERO, Product((Num(3), y, ONE)))),
        Product((Num(2), Power(x, ONE), Num(5))),
        Power(Product((x,)), Sum((Num(0), Num(2)))),
        Mod(Sum((x,)), y),
    ],
)
def test_correct_is_idempotent(raw):
    once = correct(raw)
    assert correct(once) == once


def test_correct_leaves_other_nodes_alone():
    node = Log(Num(10), Num(7))
    assert correct(node) is node
    assert correct(Mod(x, y)) == Mod(x, y)


def test_operator_dunders():
    assert x + 1 == Sum((x, ONE))
    assert 2 * x == Product((Num(2), x))
    assert x - x == ZERO
    assert x / x == ONE
    assert -(-x) == x
    assert Num(1) < Num(2)
    assert Num(2) >= 2
    assert not x < 1
    assert not x > 1
    assert str(x + x) == "2x"


def test_predicates():
    assert ZERO.is_zero()
    assert ONE.is_one()
    assert rational(-1, 2).is_negative()
    assert Product((Num(-3), x)).is_negative()
    assert not Product((Num(3), x)).is_negative()
    assert not x.is_num()
    assert Mod(x, y).is_mod()


def test_tree_helpers():
    assert contains_var(Sin(Product((Num(2), x)), AngleMeasure.RADIAN))
    assert not contains_var(Sum((Const(Constant.PI), Num(1))))
    assert complexity(Product((Num(2), x))) == 2
    assert complexity(Sin(x, AngleMeasure.RADIAN)) == 2
    assert complexity(Log(Num(2), Power(x, Num(3)))) == 4
