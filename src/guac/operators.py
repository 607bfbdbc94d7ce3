from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Dict, Optional

from . import trig
from .add import add, sub
from .angle import AngleMeasure
from .constant import Constant
from .errors import BadInput, BadLog, BadTan, Complex, DivideByZero, GuacError
from .expr import Const, Expr, Num, rational
from .mul import div, mul
from .power import abs_, cbrt, inv, log, neg, pow_, rem, sqrt

logger = logging.getLogger(__name__)

Check = Callable[..., Optional[GuacError]]


@dataclass(frozen=True)
class Operator:
    func: Callable[..., Expr]
    check: Optional[Check] = None


def _is_non_positive(x: Expr) -> bool:
    return x.is_zero() or x < 0


def _divisor_check(x: Expr, y: Expr) -> Optional[GuacError]:
    if y.is_zero():
        return DivideByZero()
    return None


def _pow_check(x: Expr, y: Expr) -> Optional[GuacError]:
    if x.is_zero() and y < 0:
        return DivideByZero("zero to a negative power")
    if x < 0 and isinstance(y, Num) and y.value.denominator != 1:
        return Complex("non-integer power of a negative number")
    return None


def _log_check(base: Expr, arg: Expr) -> Optional[GuacError]:
    if _is_non_positive(arg):
        return BadLog()
    if _is_non_positive(base) or base.is_one():
        return BadLog("bad base")
    return None


def _inv_check(x: Expr, unit: AngleMeasure) -> Optional[GuacError]:
    if x.is_zero():
        return DivideByZero()
    return None


def _root_check(x: Expr, unit: AngleMeasure) -> Optional[GuacError]:
    if x < 0:
        return Complex("root of a negative number")
    return None


def _ln_check(x: Expr, unit: AngleMeasure) -> Optional[GuacError]:
    if _is_non_positive(x):
        return BadLog()
    return None


def _tan_check(x: Expr, unit: AngleMeasure) -> Optional[GuacError]:
    turns = trig.into_turns(x, unit)
    if isinstance(turns, Num) and turns.value % Fraction(1, 2) == Fraction(1, 4):
        return BadTan()
    return None


def _unit_interval_check(x: Expr, unit: AngleMeasure) -> Optional[GuacError]:
    if x < -1 or x > 1:
        return Complex(f"{x} is outside [-1, 1]")
    return None


def _ln(x: Expr, unit: AngleMeasure) -> Expr:
    return log(Const(Constant.E), x)


BINARY: Dict[str, Operator] = {
    "+": Operator(add),
    "-": Operator(sub),
    "*": Operator(mul),
    "/": Operator(div, _divisor_check),
    "%": Operator(rem, _divisor_check),
    "^": Operator(pow_, _pow_check),
    "log": Operator(log, _log_check),
}

UNARY: Dict[str, Operator] = {
    "neg": Operator(lambda x, unit: neg(x)),
    "inv": Operator(lambda x, unit: inv(x), _inv_check),
    "sqrt": Operator(lambda x, unit: sqrt(x), _root_check),
    "cbrt": Operator(lambda x, unit: cbrt(x), _root_check),
    "square": Operator(lambda x, unit: pow_(x, rational(2))),
    "abs": Operator(lambda x, unit: abs_(x)),
    "ln": Operator(_ln, _ln_check),
    "sin": Operator(trig.generic_sin),
    "cos": Operator(trig.generic_cos),
    "tan": Operator(trig.generic_tan, _tan_check),
    "asin": Operator(trig.asin, _unit_interval_check),
    "acos": Operator(trig.acos, _unit_interval_check),
    "atan": Operator(trig.atan),
}


def _reject(symbol: str, error: GuacError, *operands: Expr) -> GuacError:
    logger.debug("rejected %s on %s: %s", symbol, ", ".join(map(str, operands)), error)
    return error


def apply_unary(symbol: str, x: Expr, unit: AngleMeasure = AngleMeasure.RADIAN) -> Expr:
    op = UNARY.get(symbol)
    if op is None:
        raise BadInput(f"unknown operator {symbol!r}")
    if op.check is not None:
        error = op.check(x, unit)
        if error is not None:
            raise _reject(symbol, error, x)
    return op.func(x, unit)


def apply_binary(symbol: str, x: Expr, y: Expr) -> Expr:
    """Apply ``x <symbol> y``; for ``log``, ``x`` is the base."""
    op = BINARY.get(symbol)
    if op is None:
        raise BadInput(f"unknown operator {symbol!r}")
    if op.check is not None:
        error = op.check(x, y)
        if error is not None:
            raise _reject(symbol, error, x, y)
    return op.func(x, y)
