from __future__ import annotations

from fractions import Fraction
from typing import List

from .angle import AngleMeasure
from .constant import Constant
from .expr import (
    TRIG,
    Acos,
    Asin,
    Atan,
    Const,
    Cos,
    Expr,
    Log,
    Mod,
    Num,
    Power,
    Product,
    Sin,
    Sum,
    Tan,
    Var,
    correct,
    exponent,
    is_negative,
)
from .power import inv, neg
from .radix import Radix, display_bigrational

ROOTS = {Fraction(1, 2): 2, Fraction(1, 3): 3}

_TRIG_NAMES = {Sin: "sin", Cos: "cos", Tan: "tan", Asin: "arcsin", Acos: "arccos", Atan: "arctan"}
_INVERSE_TRIG = (Asin, Acos, Atan)


def grouping_priority(expr: Expr) -> int:
    """Position in the order of operations; a child binding looser than its parent is parenthesized."""
    if isinstance(expr, Num):
        if expr.value < 0:
            return 4
        return 0 if expr.value.denominator == 1 else 2
    if isinstance(expr, Power):
        return 1
    if isinstance(expr, Product):
        return 2
    if isinstance(expr, Sum):
        return 3
    return 0


def has_pos_exp(expr: Expr) -> bool:
    # A rational with numerator 1 is a reciprocal and belongs below the bar.
    if isinstance(expr, Num):
        return expr.value.numerator != 1
    return not is_negative(exponent(expr))


def _juxtaposes(factor: Expr) -> bool:
    if isinstance(factor, Power):
        if isinstance(factor.exp, Num) and abs(factor.exp.value) in ROOTS:
            return False
        factor = factor.base
        if isinstance(factor, (Num, Sum)):
            return False
    return isinstance(factor, (Var, Const, Sum))


class Formatter:
    """Renders expressions as plain infix text in a given radix."""

    separator = "·"

    def __init__(self, radix: Radix = Radix.DECIMAL):
        self.radix = radix

    def format(self, expr: Expr) -> str:
        if isinstance(expr, Num):
            return self.num(expr.value)
        if isinstance(expr, Sum):
            return self.sum(expr)
        if isinstance(expr, Product):
            return self.product(expr)
        if isinstance(expr, Power):
            return self.power(expr)
        if isinstance(expr, Var):
            return self.var(expr.name)
        if isinstance(expr, Const):
            return self.const(expr.constant)
        if isinstance(expr, Mod):
            return self.mod(self.child(expr, expr.lhs), self.child(expr, expr.rhs))
        if isinstance(expr, Log):
            return self.log(self.format(expr.base), self.format(expr.arg))
        if isinstance(expr, _INVERSE_TRIG):
            return self.inverse_trig(_TRIG_NAMES[type(expr)], self.format(expr.arg), expr.unit)
        if isinstance(expr, TRIG):
            return self.trig(_TRIG_NAMES[type(expr)], self.format(expr.arg), expr.unit)
        raise TypeError(f"cannot format {expr!r}")

    def group(self, text: str) -> str:
        return f"({text})"

    def child(self, parent: Expr, child: Expr) -> str:
        text = self.format(child)
        if grouping_priority(child) > grouping_priority(parent) or isinstance(child, Mod):
            return self.group(text)
        return text

    def num(self, value: Fraction) -> str:
        return display_bigrational(value, self.radix)

    def var(self, name: str) -> str:
        return name

    def const(self, constant: Constant) -> str:
        return constant.glyph

    def sum(self, expr: Sum) -> str:
        positive = [t for t in expr.terms if not is_negative(t)]
        negative = [t for t in expr.terms if is_negative(t)]
        text = "+".join(self.child(expr, t) for t in positive)
        for term in negative:
            text += "-" + self.child(expr, neg(term))
        return text

    def joined(self, parent: Expr, expr: Expr) -> str:
        """Factors of ``expr`` side by side, without splitting out a denominator."""
        if not isinstance(expr, Product):
            return self.child(parent, expr)
        parts: List[str] = []
        prev = None
        for factor in expr.factors:
            text = self.child(parent, factor)
            if prev is not None:
                parts.append(self.joiner(prev, factor))
            parts.append(text)
            prev = factor
        return "".join(parts)

    def joiner(self, prev: Expr, nxt: Expr) -> str:
        # Above base ten letters are digits, so coefficients need a separator.
        if (
            self.radix.value <= 10
            and isinstance(prev, Num)
            and prev.value.denominator == 1
            and _juxtaposes(nxt)
        ):
            return ""
        return self.separator

    def product(self, expr: Product) -> str:
        if is_negative(expr):
            return "-" + self.format(neg(expr))
        numer = correct(Product(tuple(f for f in expr.factors if has_pos_exp(f))))
        denom = correct(Product(tuple(inv(f) for f in expr.factors if not has_pos_exp(f))))
        if denom.is_one():
            return self.joined(expr, numer)
        return self.fraction(expr, numer, denom)

    def fraction(self, parent: Expr, numer: Expr, denom: Expr) -> str:
        bottom = self.joined(parent, denom)
        if isinstance(denom, Product):
            bottom = self.group(bottom)
        return f"{self.joined(parent, numer)}/{bottom}"

    def power(self, expr: Power) -> str:
        exp = expr.exp
        if isinstance(exp, Num):
            degree = ROOTS.get(abs(exp.value))
            if degree is not None:
                text = self.root(self.format(expr.base), degree)
                return self.reciprocal(text) if exp.value < 0 else text
        return self.raised(self.child(expr, expr.base), self.child(expr, exp))

    def root(self, radicand: str, degree: int) -> str:
        name = "sqrt" if degree == 2 else "cbrt"
        return f"{name}({radicand})"

    def reciprocal(self, text: str) -> str:
        return f"1/{text}"

    def raised(self, base: str, exp: str) -> str:
        return f"{base}^{exp}"

    def mod(self, lhs: str, rhs: str) -> str:
        return f"{lhs} mod {rhs}"

    def log(self, base: str, arg: str) -> str:
        return f"log({base})({arg})"

    def trig(self, name: str, arg: str, unit: AngleMeasure) -> str:
        return f"{name}({arg} {unit})"

    def inverse_trig(self, name: str, arg: str, unit: AngleMeasure) -> str:
        return f"({name}({arg}) {unit})"


def display(expr: Expr, radix: Radix = Radix.DECIMAL) -> str:
    return Formatter(radix).format(expr)

