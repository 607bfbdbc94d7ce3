from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, List, Optional, Tuple, Union

from .angle import AngleMeasure
from .constant import Constant
from .rational import RationalLike, as_fraction


class Expr:
    """Base of every expression node.

    Nodes are immutable; the operators below always return a new canonical
    tree. Plain ints and Fractions are accepted on either side.
    """

    def __add__(self, other: Operand) -> "Expr":
        return add(self, coerce(other))

    def __radd__(self, other: Operand) -> "Expr":
        return add(coerce(other), self)

    def __sub__(self, other: Operand) -> "Expr":
        return sub(self, coerce(other))

    def __rsub__(self, other: Operand) -> "Expr":
        return sub(coerce(other), self)

    def __mul__(self, other: Operand) -> "Expr":
        return mul(self, coerce(other))

    def __rmul__(self, other: Operand) -> "Expr":
        return mul(coerce(other), self)

    def __truediv__(self, other: Operand) -> "Expr":
        return div(self, coerce(other))

    def __rtruediv__(self, other: Operand) -> "Expr":
        return div(coerce(other), self)

    def __mod__(self, other: Operand) -> "Expr":
        return rem(self, coerce(other))

    def __rmod__(self, other: Operand) -> "Expr":
        return rem(coerce(other), self)

    def __pow__(self, other: Operand) -> "Expr":
        return pow_(self, coerce(other))

    def __rpow__(self, other: Operand) -> "Expr":
        return pow_(coerce(other), self)

    def __neg__(self) -> "Expr":
        return neg(self)

    def __abs__(self) -> "Expr":
        return abs_(self)

    def __lt__(self, other: Operand) -> bool:
        order = partial_cmp(self, coerce(other))
        return order is not None and order < 0

    def __le__(self, other: Operand) -> bool:
        order = partial_cmp(self, coerce(other))
        return order is not None and order <= 0

    def __gt__(self, other: Operand) -> bool:
        order = partial_cmp(self, coerce(other))
        return order is not None and order > 0

    def __ge__(self, other: Operand) -> bool:
        order = partial_cmp(self, coerce(other))
        return order is not None and order >= 0

    def __str__(self) -> str:
        return display(self)

    def correct(self) -> "Expr":
        return correct(self)

    def inv(self) -> "Expr":
        return inv(self)

    def sqrt(self) -> "Expr":
        return sqrt(self)

    def log(self, base: Operand) -> "Expr":
        """Logarithm of ``self`` in ``base``."""
        return log(coerce(base), self)

    def to_f64(self) -> float:
        return to_f64(self)

    def is_zero(self) -> bool:
        return isinstance(self, Num) and self.value == 0

    def is_one(self) -> bool:
        return isinstance(self, Num) and self.value == 1

    def is_num(self) -> bool:
        return isinstance(self, Num)

    def is_mod(self) -> bool:
        return isinstance(self, Mod)

    def is_negative(self) -> bool:
        return is_negative(self)


Operand = Union[Expr, RationalLike]


@dataclass(frozen=True)
class Num(Expr):
    value: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_fraction(self.value))


def _unordered_eq(lhs: Tuple[Expr, ...], rhs: Tuple[Expr, ...]) -> bool:
    return len(lhs) == len(rhs) and Counter(lhs) == Counter(rhs)


@dataclass(frozen=True, eq=False)
class Sum(Expr):
    terms: Tuple[Expr, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sum) and _unordered_eq(self.terms, other.terms)

    def __hash__(self) -> int:
        return hash((Sum, frozenset(Counter(self.terms).items())))


@dataclass(frozen=True, eq=False)
class Product(Expr):
    factors: Tuple[Expr, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "factors", tuple(self.factors))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Product) and _unordered_eq(self.factors, other.factors)

    def __hash__(self) -> int:
        return hash((Product, frozenset(Counter(self.factors).items())))


@dataclass(frozen=True)
class Power(Expr):
    base: Expr
    exp: Expr


@dataclass(frozen=True)
class Log(Expr):
    base: Expr
    arg: Expr


@dataclass(frozen=True)
class Var(Expr):
    name: str


@dataclass(frozen=True)
class Const(Expr):
    constant: Constant


@dataclass(frozen=True)
class Mod(Expr):
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class Sin(Expr):
    arg: Expr
    unit: AngleMeasure


@dataclass(frozen=True)
class Cos(Expr):
    arg: Expr
    unit: AngleMeasure


@dataclass(frozen=True)
class Tan(Expr):
    arg: Expr
    unit: AngleMeasure


@dataclass(frozen=True)
class Asin(Expr):
    arg: Expr
    unit: AngleMeasure


@dataclass(frozen=True)
class Acos(Expr):
    arg: Expr
    unit: AngleMeasure


@dataclass(frozen=True)
class Atan(Expr):
    arg: Expr
    unit: AngleMeasure


TRIG = (Sin, Cos, Tan, Asin, Acos, Atan)

ZERO = Num(0)
ONE = Num(1)
NEG_ONE = Num(-1)
HALF = Num(Fraction(1, 2))


def coerce(value: Operand) -> Expr:
    if isinstance(value, Expr):
        return value
    return Num(as_fraction(value))


def rational(num: int, den: int = 1) -> Num:
    return Num(Fraction(num, den))


def terms(expr: Expr) -> List[Expr]:
    if isinstance(expr, Sum):
        return list(expr.terms)
    return [expr]


def factors(expr: Expr) -> List[Expr]:
    if isinstance(expr, Product):
        return list(expr.factors)
    return [expr]


def coefficient(expr: Expr) -> Optional[Fraction]:
    """The rational factor of a corrected expression, or None when it is an implicit 1."""
    for factor in factors(expr):
        if isinstance(factor, Num):
            return factor.value
    return None


def base(expr: Expr) -> Expr:
    if isinstance(expr, Power):
        return expr.base
    return expr


def exponent(expr: Expr) -> Expr:
    if isinstance(expr, Power):
        return expr.exp
    return ONE


def is_negative(expr: Expr) -> bool:
    if isinstance(expr, Num):
        return expr.value < 0
    if isinstance(expr, Product):
        coef = coefficient(expr)
        return coef is not None and coef < 0
    return False


def children(expr: Expr) -> Iterable[Expr]:
    if isinstance(expr, Sum):
        return expr.terms
    if isinstance(expr, Product):
        return expr.factors
    if isinstance(expr, Power):
        return (expr.base, expr.exp)
    if isinstance(expr, Log):
        return (expr.base, expr.arg)
    if isinstance(expr, Mod):
        return (expr.lhs, expr.rhs)
    if isinstance(expr, TRIG):
        return (expr.arg,)
    return ()


def contains_var(expr: Expr) -> bool:
    if isinstance(expr, Var):
        return True
    return any(contains_var(child) for child in children(expr))


def complexity(expr: Expr) -> int:
    """Count of leaves, plus one per log, mod and trig node."""
    if isinstance(expr, (Num, Var, Const)):
        return 1
    total = sum(complexity(child) for child in children(expr))
    if isinstance(expr, (Log, Mod) + TRIG):
        total += 1
    return total


def correct(expr: Expr) -> Expr:
    """Perform the obvious, cheap simplifications; idempotent."""
    if isinstance(expr, Sum):
        kept = [t for t in (correct(t) for t in expr.terms) if not t.is_zero()]
        if not kept:
            return ZERO
        if len(kept) == 1:
            return kept[0]
        return Sum(tuple(kept))
    if isinstance(expr, Product):
        corrected = [correct(f) for f in expr.factors]
        coef = Fraction(1)
        for factor in corrected:
            if isinstance(factor, Num):
                coef *= factor.value
        if coef == 0:
            return ZERO
        rest = [f for f in corrected if not isinstance(f, Num)]
        if coef != 1:
            rest.insert(0, Num(coef))
        if not rest:
            return ONE
        if len(rest) == 1:
            return rest[0]
        return Product(tuple(rest))
    if isinstance(expr, Power):
        b = correct(expr.base)
        e = correct(expr.exp)
        if e.is_one():
            return b
        if e.is_zero():
            return ONE
        return Power(b, e)
    return expr


from .add import add, sub  # noqa: E402
from .cast import partial_cmp, to_f64  # noqa: E402
from .display import display  # noqa: E402
from .mul import div, mul  # noqa: E402
from .power import abs_, inv, log, neg, pow_, rem, sqrt  # noqa: E402
