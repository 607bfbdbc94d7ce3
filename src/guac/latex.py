from __future__ import annotations

from fractions import Fraction

from .angle import AngleMeasure
from .constant import Constant
from .display import ROOTS, Formatter
from .errors import LatexError
from .expr import Expr, Num, Power
from .radix import Radix, display_bigint


def _unit_suffix(unit: AngleMeasure) -> str:
    if unit is AngleMeasure.RADIAN:
        return ""
    symbol = unit.symbol.replace("π", r"\pi")
    return rf"\,\mathrm{{{symbol}}}"


class LatexFormatter(Formatter):
    """Renders expressions as LaTeX math, as accepted by ``MathTex``."""

    separator = r" \cdot "

    def group(self, text: str) -> str:
        return rf"\left({text}\right)"

    def num(self, value: Fraction) -> str:
        if value < 0:
            return "-" + self.num(-value)
        numer = display_bigint(value.numerator, self.radix)
        if value.denominator == 1:
            return numer
        denom = display_bigint(value.denominator, self.radix)
        return rf"\frac{{{numer}}}{{{denom}}}"

    def var(self, name: str) -> str:
        if not name.isascii():
            raise LatexError("non-ascii")
        if "\\" in name:
            raise LatexError("'\\' in var")
        if len(name) > 1:
            return rf"\mathrm{{{name}}}"
        return name

    def const(self, constant: Constant) -> str:
        return constant.latex

    def fraction(self, parent: Expr, numer: Expr, denom: Expr) -> str:
        top = self.joined(parent, numer)
        bottom = self.joined(parent, denom)
        return rf"\frac{{{top}}}{{{bottom}}}"

    def power(self, expr: Power) -> str:
        exp = expr.exp
        if isinstance(exp, Num) and abs(exp.value) in ROOTS:
            return super().power(expr)
        return self.raised(self.child(expr, expr.base), self.format(exp))

    def root(self, radicand: str, degree: int) -> str:
        if degree == 2:
            return rf"\sqrt{{{radicand}}}"
        return rf"\sqrt[{degree}]{{{radicand}}}"

    def reciprocal(self, text: str) -> str:
        return rf"\frac{{1}}{{{text}}}"

    def raised(self, base: str, exp: str) -> str:
        return f"{{{base}}}^{{{exp}}}"

    def mod(self, lhs: str, rhs: str) -> str:
        return rf"{lhs} \bmod {rhs}"

    def log(self, base: str, arg: str) -> str:
        return rf"\log_{{{base}}}{{{arg}}}"

    def trig(self, name: str, arg: str, unit: AngleMeasure) -> str:
        return "\\" + name + rf"\left({arg}{_unit_suffix(unit)}\right)"

    def inverse_trig(self, name: str, arg: str, unit: AngleMeasure) -> str:
        return "\\" + name + rf"\left({arg}\right){_unit_suffix(unit)}"


def display_latex(expr: Expr, radix: Radix = Radix.DECIMAL) -> str:
    """LaTeX for ``expr``; raises :class:`LatexError` for variable names LaTeX cannot typeset."""
    return LatexFormatter(radix).format(expr)
