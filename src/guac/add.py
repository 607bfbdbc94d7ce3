from __future__ import annotations

from fractions import Fraction
from typing import List

from .expr import Expr, Num, Product, Sum, coefficient, correct, factors, terms


def _symbolic(expr: Expr) -> List[Expr]:
    return [f for f in factors(expr) if not isinstance(f, Num)]


def is_like_term(lhs: Expr, rhs: Expr) -> bool:
    """Same non-numeric factors, ignoring order and coefficients."""
    lhs_factors = _symbolic(lhs)
    rhs_factors = _symbolic(rhs)
    return all(f in lhs_factors for f in rhs_factors) and all(
        f in rhs_factors for f in lhs_factors
    )


def push_factor(expr: Expr, factor: Expr) -> Expr:
    return Product(tuple(factors(expr)) + (factor,))


def combine_like_terms(lhs: Expr, rhs: Expr) -> Expr:
    """Add two like terms by combining their coefficients.

    The result is not corrected; a term with a missing coefficient counts as
    one of itself.
    """
    lhs_coef = coefficient(lhs)
    rhs_coef = coefficient(rhs)
    if lhs_coef is not None:
        total = lhs_coef + (rhs_coef if rhs_coef is not None else Fraction(1))
        out = factors(lhs)
        for i, factor in enumerate(out):
            if isinstance(factor, Num):
                out[i] = Num(total)
                break
        if len(out) == 1:
            return out[0]
        return Product(tuple(out))
    if rhs_coef is not None:
        return push_factor(lhs, Num(rhs_coef + 1))
    return push_factor(lhs, Num(2))


def add(lhs: Expr, rhs: Expr) -> Expr:
    out = terms(lhs)
    existing = len(out)
    for term in terms(rhs):
        for i in range(existing):
            if is_like_term(term, out[i]):
                out[i] = combine_like_terms(out[i], term)
                break
        else:
            out.append(term)
    return correct(Sum(tuple(out)))


def sub(lhs: Expr, rhs: Expr) -> Expr:
    return add(lhs, neg(rhs))


from .power import neg  # noqa: E402
