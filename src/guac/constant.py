from __future__ import annotations

import math
from enum import Enum

from .errors import BadInput


class Constant(Enum):
    """Mathematical and physical constants.

    Each member is ``(glyph, latex, value)``; physical constants use their
    exact SI values where the SI defines one, CODATA 2018 otherwise.
    """

    PI = ("π", r"\pi", math.pi)
    TAU = ("τ", r"\tau", math.tau)
    E = ("e", "e", math.e)
    GAMMA = ("γ", r"\gamma", 0.5772156649015329)
    VCS = ("ΔνCs", r"\Delta\nu_{\mathrm{Cs}}", 9192631770.0)
    C = ("c", "c", 299792458.0)
    H = ("h", "h", 6.62607015e-34)
    QE = ("qₑ", "q_e", 1.602176634e-19)
    K = ("k", "k_B", 1.380649e-23)
    NA = ("Nₐ", "N_A", 6.02214076e23)
    KCD = ("Kcd", r"K_{\mathrm{cd}}", 683.0)
    HBAR = ("ħ", r"\hbar", 1.054571817e-34)
    G = ("G", "G", 6.6743e-11)
    ME = ("mₑ", "m_e", 9.1093837015e-31)
    MP = ("mₚ", "m_p", 1.67262192369e-27)

    def __init__(self, glyph: str, latex: str, approx: float):
        self.glyph = glyph
        self.latex = latex
        self.approx = approx

    def to_f64(self) -> float:
        return self.approx

    @classmethod
    def parse(cls, text: str) -> "Constant":
        found = _BY_NAME.get(text)
        if found is None:
            raise BadInput(f"unknown constant {text!r}")
        return found

    def __str__(self) -> str:
        return self.glyph


_BY_NAME = {c.glyph: c for c in Constant}
_BY_NAME.update({
    "pi": Constant.PI,
    "tau": Constant.TAU,
    "gamma": Constant.GAMMA,
    "hbar": Constant.HBAR,
})
