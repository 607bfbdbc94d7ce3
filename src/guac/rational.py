from __future__ import annotations

from fractions import Fraction
from math import isqrt
from typing import Optional, Union

from .errors import BadInput, CastError, DivideByZero

RationalLike = Union[int, Fraction]

ONE = Fraction(1)


def as_fraction(value: RationalLike) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"cannot make a rational from {value!r}")
    return Fraction(value)


def is_integer(value: Fraction) -> bool:
    return value.denominator == 1


def divide(lhs: Fraction, rhs: Fraction) -> Fraction:
    if rhs == 0:
        raise DivideByZero()
    return lhs / rhs


def int_pow(base: Fraction, exponent: Fraction) -> Fraction:
    if not is_integer(exponent):
        raise ValueError(f"non-integer exponent {exponent}")
    power = exponent.numerator
    if base == 0 and power < 0:
        raise DivideByZero()
    if power >= 0:
        return base ** power
    return 1 / base ** -power


def truncated_rem(lhs: Fraction, rhs: Fraction) -> Fraction:
    """Remainder of ``lhs / rhs`` carrying the sign of the dividend."""
    quotient = divide(lhs, rhs)
    whole = quotient.numerator // quotient.denominator
    if whole < 0 and whole * quotient.denominator != quotient.numerator:
        whole += 1
    return lhs - rhs * whole


def _floor_root(n: int, degree: int) -> int:
    if n < 2 or degree == 1:
        return n
    if degree == 2:
        return isqrt(n)
    x = 1 << -(-n.bit_length() // degree)
    while True:
        y = ((degree - 1) * x + n // x ** (degree - 1)) // degree
        if y >= x:
            return x
        x = y


def _int_root(n: int, degree: int) -> Optional[int]:
    if n < 0:
        return None
    root = _floor_root(n, degree)
    return root if root ** degree == n else None


def exact_root(value: Fraction, degree: int) -> Optional[Fraction]:
    if value < 0 or degree < 1:
        return None
    num = _int_root(value.numerator, degree)
    den = _int_root(value.denominator, degree)
    if num is None or den is None:
        return None
    return Fraction(num, den)


def exact_log(base: Fraction, arg: Fraction, limit: int = 4096) -> Optional[int]:
    """Integer ``k`` with ``base ** k == arg``, if there is one."""
    if base <= 0 or base == 1 or arg <= 0:
        return None
    if (arg > 1) == (base > 1):
        step, sign = base, 1
    else:
        step, sign = 1 / base, -1
    power = ONE
    for k in range(limit + 1):
        if power == arg:
            return sign * k
        power *= step
        if (power > arg) if arg > 1 else (power < arg):
            return None
    return None


def to_float(value: Fraction) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise CastError(f"{value} does not fit in a float") from exc


def parse_rational(text: str) -> Fraction:
    """Parse ``a/b``, ``1.25`` or ``2e-3``, falling back to float syntax."""
    cleaned = text.strip()
    if not cleaned:
        raise BadInput("empty number")
    try:
        return Fraction(cleaned)
    except (ValueError, ZeroDivisionError):
        pass
    try:
        return Fraction(float(cleaned))
    except (ValueError, OverflowError) as exc:
        raise BadInput(cleaned) from exc
