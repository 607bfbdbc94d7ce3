from __future__ import annotations


class GuacError(Exception):
    """A recoverable error on the user's end.

    Every error carries a numeric code; ``str(error)`` renders it the way the
    calculator's status line shows it, e.g. ``E00: divide by zero``.
    """

    code = 99
    message = "unexpected error"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"E{self.code:02}: {self.message}"
        if self.detail:
            text = f"{text}: {self.detail}"
        return text


class DivideByZero(GuacError):
    code = 0
    message = "divide by zero"


class Complex(GuacError):
    code = 1
    message = "complex not yet supported"


class BadInput(GuacError):
    code = 2
    message = "bad input"


class ParseError(BadInput):
    pass


class BadRadix(GuacError):
    code = 4
    message = "bad radix"


class BadTan(GuacError):
    code = 5
    message = "tangent of π/2"


class BadLog(GuacError):
    code = 6
    message = "log of n ≤ 0"


class BadConfig(GuacError):
    code = 14
    message = "bad config"


class CastError(ValueError):
    """An expression has no numeric closed form."""


class LatexError(ValueError):
    pass
