from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, Optional

from .errors import BadInput, BadRadix

# The ``b - 2``th abbreviation names base ``b``.
ABBVS = (
    "bin", "tri", "qua", "qui", "sex", "sep", "oct", "non", "dec", "ele", "doz", "bak", "bis",
    "trq", "hex", "sub", "trs", "unt", "vig", "tis", "bie", "unb", "tet", "pen", "bik", "trn",
    "ter", "utt", "pet", "unp", "ttr", "trl", "bib", "pnt", "nif", "unn", "bit", "trk", "pec",
    "upn", "hes", "unh", "tel", "pnn", "bnb", "ubn", "hec", "hep", "peg", "trb", "tek", "unr",
    "hen", "pel", "het", "tin", "bnt", "ubt", "heg", "unx", "bip", "hpt", "occ",
)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ!@"

MIN_RADIX = 2
MAX_RADIX = 64


@dataclass(frozen=True, order=True)
class Radix:
    """A numeral base in ``2..=64``.

    ``str(radix)`` is its three-letter abbreviation; :meth:`parse` accepts the
    abbreviation or the single digit character whose value is the base
    (``"hex"`` or ``"g"`` for sixteen).
    """

    value: int

    BINARY: ClassVar["Radix"]
    OCTAL: ClassVar["Radix"]
    DECIMAL: ClassVar["Radix"]
    DOZENAL: ClassVar["Radix"]
    HEX: ClassVar["Radix"]
    OCTOCTAL: ClassVar["Radix"]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise BadRadix(repr(self.value))
        if not MIN_RADIX <= self.value <= MAX_RADIX:
            raise BadRadix(str(self.value))

    @classmethod
    def from_abbv(cls, abbv: str) -> "Radix":
        try:
            return cls(ABBVS.index(abbv) + MIN_RADIX)
        except ValueError:
            raise BadRadix(abbv) from None

    @classmethod
    def from_char(cls, char: str) -> "Radix":
        if len(char) != 1 or char not in DIGITS:
            raise BadRadix(char)
        return cls(DIGITS.index(char))

    @classmethod
    def parse(cls, text: str) -> "Radix":
        if len(text) == 3:
            return cls.from_abbv(text)
        if len(text) == 1:
            return cls.from_char(text)
        raise BadRadix(text)

    @property
    def abbv(self) -> str:
        return ABBVS[self.value - MIN_RADIX]

    @property
    def char(self) -> Optional[str]:
        if self.value < len(DIGITS):
            return DIGITS[self.value]
        return None

    def digit_value(self, char: str) -> Optional[int]:
        index = DIGITS.find(char)
        if index < 0 or index >= self.value or len(char) != 1:
            return None
        return index

    def __str__(self) -> str:
        return self.abbv

    def __int__(self) -> int:
        return self.value


Radix.BINARY = Radix(2)
Radix.OCTAL = Radix(8)
Radix.DECIMAL = Radix(10)
Radix.DOZENAL = Radix(12)
Radix.HEX = Radix(16)
Radix.OCTOCTAL = Radix(64)


def parse_bigint(digits: str, radix: Radix) -> int:
    if digits.startswith("-") and not digits.startswith("--"):
        return -parse_bigint(digits[1:], radix)
    if not digits:
        raise BadInput("empty number")
    result = 0
    for char in digits:
        value = radix.digit_value(char)
        if value is None:
            raise BadInput(f"{char!r} is not a {radix} digit")
        result = result * radix.value + value
    return result


def display_bigint(value: int, radix: Radix) -> str:
    if value < 0:
        return "-" + display_bigint(-value, radix)
    if value == 0:
        return DIGITS[0]
    out = []
    while value:
        value, digit = divmod(value, radix.value)
        out.append(DIGITS[digit])
    return "".join(reversed(out))


def display_bigrational(value: Fraction, radix: Radix) -> str:
    if value < 0:
        return "-" + display_bigrational(-value, radix)
    text = display_bigint(value.numerator, radix)
    if value.denominator != 1:
        text += "/" + display_bigint(value.denominator, radix)
    return text


def parse_bigrational(text: str, radix: Radix) -> Fraction:
    """Parse ``n``, ``n/d`` or ``int.frac`` written in ``radix``."""
    if text.startswith("-"):
        return -parse_bigrational(text[1:], radix)
    if "/" in text:
        num, _, den = text.partition("/")
        denominator = parse_bigint(den, radix)
        if denominator == 0:
            raise BadInput(f"zero denominator in {text!r}")
        return Fraction(parse_bigint(num, radix), denominator)
    if "." in text:
        whole, _, frac = text.partition(".")
        if not frac:
            raise BadInput(text)
        whole_value = parse_bigint(whole, radix) if whole else 0
        return whole_value + Fraction(parse_bigint(frac, radix), radix.value ** len(frac))
    return Fraction(parse_bigint(text, radix))
