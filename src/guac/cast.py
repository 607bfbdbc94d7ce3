from __future__ import annotations

import math
from typing import Optional

from .angle import AngleMeasure, convert_angle_f64
from .errors import CastError
from .expr import Acos, Asin, Atan, Const, Cos, Expr, Log, Mod, Num, Power, Product, Sin, Sum, Tan, Var
from .rational import to_float


def _radians(value: float, unit: AngleMeasure) -> float:
    return convert_angle_f64(value, unit, AngleMeasure.RADIAN)


def _from_radians(value: float, unit: AngleMeasure) -> float:
    return convert_angle_f64(value, AngleMeasure.RADIAN, unit)


def _approx(expr: Expr) -> float:
    if isinstance(expr, Num):
        return to_float(expr.value)
    if isinstance(expr, Const):
        return expr.constant.to_f64()
    if isinstance(expr, Var):
        raise CastError(f"variable {expr.name!r} has no value")
    if isinstance(expr, Sum):
        return math.fsum(_approx(t) for t in expr.terms)
    if isinstance(expr, Product):
        return math.prod(_approx(f) for f in expr.factors)
    if isinstance(expr, Power):
        return math.pow(_approx(expr.base), _approx(expr.exp))
    if isinstance(expr, Log):
        return math.log(_approx(expr.arg), _approx(expr.base))
    if isinstance(expr, Mod):
        return math.fmod(_approx(expr.lhs), _approx(expr.rhs))
    if isinstance(expr, Sin):
        return math.sin(_radians(_approx(expr.arg), expr.unit))
    if isinstance(expr, Cos):
        return math.cos(_radians(_approx(expr.arg), expr.unit))
    if isinstance(expr, Tan):
        return math.tan(_radians(_approx(expr.arg), expr.unit))
    if isinstance(expr, Asin):
        return _from_radians(math.asin(_approx(expr.arg)), expr.unit)
    if isinstance(expr, Acos):
        return _from_radians(math.acos(_approx(expr.arg)), expr.unit)
    if isinstance(expr, Atan):
        return _from_radians(math.atan(_approx(expr.arg)), expr.unit)
    raise CastError(f"cannot approximate {expr!r}")


def to_f64(expr: Expr) -> float:
    """Approximate ``expr`` as a float.

    Raises :class:`CastError` when any part of the tree has no numeric value:
    a free variable, a value outside a function's domain, or an overflow.
    """
    try:
        value = _approx(expr)
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        if isinstance(exc, CastError):
            raise
        raise CastError(str(exc)) from exc
    if math.isnan(value) or math.isinf(value):
        raise CastError(f"{value} is not a real number")
    return value


def partial_cmp(lhs: Expr, rhs: Expr) -> Optional[int]:
    """-1, 0 or 1 by approximate value, or None when either side has none."""
    if isinstance(lhs, Num) and isinstance(rhs, Num):
        a, b = lhs.value, rhs.value
    else:
        try:
            a, b = to_f64(lhs), to_f64(rhs)
        except CastError:
            return None
    return (a > b) - (a < b)
