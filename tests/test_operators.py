import pytest

from guac.angle import AngleMeasure
from guac.constant import Constant
from guac.errors import BadInput, BadLog, BadTan, Complex, DivideByZero
from guac.expr import ONE, Const, Num, Power, Product, Tan, Var, rational
from guac.operators import BINARY, UNARY, apply_binary, apply_unary

x = Var("x")
pi = Const(Constant.PI)


def test_binary_operators():
    assert apply_binary("+", Num(2), Num(3)) == Num(5)
    assert apply_binary("-", Num(2), Num(3)) == Num(-1)
    assert apply_binary("*", Num(2), x) == Product((Num(2), x))
    assert apply_binary("/", Num(1), Num(4)) == rational(1, 4)
    assert apply_binary("%", Num(7), Num(3)) == ONE
    assert apply_binary("^", Num(2), Num(10)) == Num(1024)
    assert apply_binary("log", Num(2), Num(8)) == Num(3)


def test_unary_operators():
    assert apply_unary("neg", x) == Product((Num(-1), x))
    assert apply_unary("inv", Num(4)) == rational(1, 4)
    assert apply_unary("sqrt", Num(9)) == Num(3)
    assert apply_unary("cbrt", Num(8)) == Num(2)
    assert apply_unary("square", x) == Power(x, Num(2))
    assert apply_unary("abs", Num(-2)) == Num(2)
    assert apply_unary("ln", Const(Constant.E)) == ONE
    assert apply_unary("sin", Num(90), AngleMeasure.DEGREE) == ONE
    assert apply_unary("acos", Num(0), AngleMeasure.DEGREE) == Num(90)


def test_every_operator_is_registered():
    assert set(BINARY) == {"+", "-", "*", "/", "%", "^", "log"}
    assert {"neg", "inv", "sqrt", "abs", "sin", "cos", "tan", "asin", "acos", "atan"} <= set(UNARY)


@pytest.mark.parametrize(
    "symbol, lhs, rhs, error",
    [
        ("/", Num(1), Num(0), DivideByZero),
        ("%", x, Num(0), DivideByZero),
        ("^", Num(0), Num(-1), DivideByZero),
        ("^", Num(-8), rational(1, 3), Complex),
        ("log", Num(10), Num(0), BadLog),
        ("log", Num(10), Num(-5), BadLog),
        ("log", Num(1), Num(5), BadLog),
        ("log", Num(-2), Num(5), BadLog),
    ],
)
def test_binary_domain_errors(symbol, lhs, rhs, error):
    with pytest.raises(error):
        apply_binary(symbol, lhs, rhs)


@pytest.mark.parametrize(
    "symbol, arg, unit, error",
    [
        ("inv", Num(0), AngleMeasure.RADIAN, DivideByZero),
        ("sqrt", Num(-4), AngleMeasure.RADIAN, Complex),
        ("cbrt", Num(-8), AngleMeasure.RADIAN, Complex),
        ("ln", Num(0), AngleMeasure.RADIAN, BadLog),
        ("tan", Product((rational(1, 2), pi)), AngleMeasure.RADIAN, BadTan),
        ("tan", Num(-270), AngleMeasure.DEGREE, BadTan),
        ("asin", Num(2), AngleMeasure.RADIAN, Complex),
        ("acos", Num(-2), AngleMeasure.RADIAN, Complex),
    ],
)
def test_unary_domain_errors(symbol, arg, unit, error):
    with pytest.raises(error):
        apply_unary(symbol, arg, unit)


def test_checks_pass_symbols_through():
    assert apply_unary("sqrt", x) == Power(x, rational(1, 2))
    assert apply_binary("/", Num(1), x) == Power(x, Num(-1))
    assert apply_unary("tan", x) == Tan(x, AngleMeasure.RADIAN)


def test_unknown_operator():
    with pytest.raises(BadInput):
        apply_unary("frobnicate", x)
    with pytest.raises(BadInput):
        apply_binary("**", x, x)
