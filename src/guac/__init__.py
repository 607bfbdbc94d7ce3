"""Exact symbolic expressions for an RPN calculator."""

from .expr import (
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
)
from .add import add, sub
from .angle import AngleMeasure
from .cast import partial_cmp, to_f64
from .config import Config, load_config
from .constant import Constant
from .display import display
from .errors import (
    BadConfig,
    BadInput,
    BadLog,
    BadRadix,
    BadTan,
    CastError,
    Complex,
    DivideByZero,
    GuacError,
    LatexError,
    ParseError,
)
from .latex import display_latex
from .mul import div, mul
from .operators import apply_binary, apply_unary
from .parser import parse
from .power import abs_, inv, log, neg, pow_, rem, sqrt
from .radix import Radix
from .trig import acos, asin, atan, convert_angle, generic_cos, generic_sin, generic_tan

__all__ = [
    "Acos",
    "AngleMeasure",
    "Asin",
    "Atan",
    "BadConfig",
    "BadInput",
    "BadLog",
    "BadRadix",
    "BadTan",
    "CastError",
    "Complex",
    "Config",
    "Const",
    "Constant",
    "Cos",
    "DivideByZero",
    "Expr",
    "GuacError",
    "LatexError",
    "Log",
    "Mod",
    "Num",
    "ParseError",
    "Power",
    "Product",
    "Radix",
    "Sin",
    "Sum",
    "Tan",
    "Var",
    "abs_",
    "acos",
    "add",
    "apply_binary",
    "apply_unary",
    "asin",
    "atan",
    "convert_angle",
    "correct",
    "display",
    "display_latex",
    "div",
    "generic_cos",
    "generic_sin",
    "generic_tan",
    "inv",
    "load_config",
    "log",
    "mul",
    "neg",
    "parse",
    "partial_cmp",
    "pow_",
    "rem",
    "sqrt",
    "sub",
    "to_f64",
]
