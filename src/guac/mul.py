from __future__ import annotations

from typing import List, Optional

from .add import add, is_like_term
from .expr import NEG_ONE, Expr, Num, Product, Sum, base, correct, exponent, factors


def is_like_factor(lhs: Expr, rhs: Expr) -> bool:
    return base(lhs) == base(rhs) and is_like_term(exponent(lhs), exponent(rhs))


def _same_base(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    """``b^p · b^q`` as ``b^(p+q)``, when the exponents are like or cancel to a number."""
    if base(lhs) != base(rhs):
        return None
    exp = add(exponent(lhs), exponent(rhs))
    if is_like_factor(lhs, rhs) or isinstance(exp, Num):
        return pow_(base(lhs), exp)
    return None


def _same_exponent(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    # Only numeric bases merge, so that x^a·y^a keeps both factors.
    if isinstance(base(lhs), Num) and isinstance(base(rhs), Num) and exponent(lhs) == exponent(rhs):
        return pow_(mul(base(lhs), base(rhs)), exponent(lhs))
    return None


def _fold(out: List[Expr], factor: Expr) -> bool:
    """Merge ``factor`` into ``out`` in place; same-base merges win over same-exponent ones."""
    if isinstance(factor, Num):
        return False
    for rule in (_same_base, _same_exponent):
        for i, existing in enumerate(out):
            if isinstance(existing, Num):
                continue
            merged = rule(existing, factor)
            if merged is not None:
                out[i] = merged
                return True
    return False


def _scale(total: Sum, coef: Num) -> Expr:
    return correct(Sum(tuple(mul(term, coef) for term in total.terms)))


def mul(lhs: Expr, rhs: Expr) -> Expr:
    if isinstance(lhs, Sum) and isinstance(rhs, Num):
        return _scale(lhs, rhs)
    if isinstance(lhs, Num) and isinstance(rhs, Sum):
        return _scale(rhs, lhs)

    out = factors(lhs)
    for factor in factors(rhs):
        if not _fold(out, factor):
            out.append(factor)
    return correct(Product(tuple(out)))


def div(lhs: Expr, rhs: Expr) -> Expr:
    return mul(lhs, pow_(rhs, NEG_ONE))


from .power import pow_  # noqa: E402
