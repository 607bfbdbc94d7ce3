from __future__ import annotations

from fractions import Fraction
from typing import List

from .expr import HALF, NEG_ONE, ONE, Expr, Log, Mod, Num, Power, Product, correct, factors, is_negative
from .rational import exact_log, exact_root, int_pow, is_integer, truncated_rem

THIRD = Num(Fraction(1, 3))


def _num_pow(base: Fraction, exp: Fraction) -> Expr:
    if is_integer(exp):
        return Num(int_pow(base, exp))
    if base >= 0:
        root = exact_root(base, exp.denominator)
        if root is not None:
            return Num(int_pow(root, Fraction(exp.numerator)))
    return Power(Num(base), Num(exp))


def pow_(base: Expr, exp: Expr) -> Expr:
    """Raise ``base`` to ``exp``.

    Rational powers of rationals are evaluated only when the result is
    rational, so ``pow_(8, 1/3)`` is ``2`` but ``pow_(2, 1/2)`` stays a power.
    """
    base = correct(base)
    exp = correct(exp)
    if isinstance(base, Num) and isinstance(exp, Num):
        return _num_pow(base.value, exp.value)
    if base.is_one():
        return ONE
    if isinstance(base, Product):
        out: Expr = ONE
        for factor in base.factors:
            out = mul(out, pow_(factor, exp))
        return out
    if isinstance(base, Power):
        return pow_(base.base, mul(base.exp, exp))
    return correct(Power(base, exp))


def sqrt(expr: Expr) -> Expr:
    return pow_(expr, HALF)


def cbrt(expr: Expr) -> Expr:
    return pow_(expr, THIRD)


def inv(expr: Expr) -> Expr:
    return pow_(expr, NEG_ONE)


def neg(expr: Expr) -> Expr:
    return mul(expr, NEG_ONE)


def abs_(expr: Expr) -> Expr:
    if is_negative(expr):
        return neg(expr)
    return expr


def log(base: Expr, arg: Expr) -> Expr:
    """Logarithm of ``arg`` in ``base``."""
    base = correct(base)
    arg = correct(arg)
    if isinstance(arg, Power):
        if arg.base == base:
            return arg.exp
        return mul(arg.base, log(base, arg.exp))
    if arg == base:
        return ONE
    if isinstance(base, Num) and isinstance(arg, Num):
        exact = exact_log(base.value, arg.value)
        if exact is not None:
            return Num(exact)
    return Log(base, arg)


def _split_common(lhs: List[Expr], rhs: List[Expr]) -> List[Expr]:
    common = []
    for factor in list(lhs):
        if not isinstance(factor, Num) and factor in rhs:
            lhs.remove(factor)
            rhs.remove(factor)
            common.append(factor)
    return common


def rem(lhs: Expr, rhs: Expr) -> Expr:
    lhs = correct(lhs)
    rhs = correct(rhs)
    if lhs < rhs:
        return lhs
    if isinstance(lhs, Num) and isinstance(rhs, Num):
        return Num(truncated_rem(lhs.value, rhs.value))

    lhs_rest = factors(lhs)
    rhs_rest = factors(rhs)
    common = _split_common(lhs_rest, rhs_rest)
    if not common:
        return Mod(lhs, rhs)

    outer = correct(Product(tuple(common)))
    reduced_lhs = correct(Product(tuple(lhs_rest)))
    reduced_rhs = correct(Product(tuple(rhs_rest)))
    if isinstance(reduced_lhs, Num) and isinstance(reduced_rhs, Num):
        inner: Expr = Num(truncated_rem(reduced_lhs.value, reduced_rhs.value))
    else:
        inner = Mod(reduced_lhs, reduced_rhs)
    return mul(outer, inner)


from .mul import mul  # noqa: E402
