from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from .config import Config
from .constant import Constant
from .errors import BadInput, ParseError
from .expr import Const, Expr, Num, Var
from .operators import apply_binary, apply_unary
from .radix import Radix, parse_bigrational
from .rational import parse_rational

logger = logging.getLogger(__name__)

Token = Tuple[str, str]
Tokens = List[Token]

ADD_OPS = {"+", "-"}
MUL_OPS = {"*", "/", "%"}

FUNCTIONS = {"sin", "cos", "tan", "asin", "acos", "atan", "sqrt", "cbrt", "abs", "ln", "log"}
LETTER_CONSTANTS = {"e", "π", "τ", "γ", "ħ"}

# An exponent suffix needs a digit after the e, so 2e stays 2·e.
NUMBER_RE = re.compile(r"(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][-+]?\d+)?")
RADIX_RE = re.compile(r"([A-Za-z]{3}|[0-9A-Za-z!@])#([0-9A-Za-z!@]+(?:[./][0-9A-Za-z!@]+)?)")


def _is_constant_name(name: str) -> bool:
    try:
        Constant.parse(name)
    except BadInput:
        return False
    return len(name) > 1


def _identifier_tokens(word: str) -> Tokens:
    if word in FUNCTIONS:
        return [("FUNC", word)]
    if _is_constant_name(word):
        return [("CONST", word)]
    return [("CONST" if ch in LETTER_CONSTANTS else "IDENT", ch) for ch in word]


def tokenize(s: str) -> Tokens:
    tokens: Tokens = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch.isspace():
            i += 1
            continue
        radix_literal = RADIX_RE.match(s, i)
        if radix_literal:
            tokens.append(("RADIX", radix_literal.group(0)))
            i = radix_literal.end()
            continue
        number = NUMBER_RE.match(s, i)
        if number:
            tokens.append(("NUMBER", number.group(0)))
            i = number.end()
            continue
        if ch.isalpha():
            j = i
            while j < len(s) and s[j].isalpha():
                j += 1
            tokens.extend(_identifier_tokens(s[i:j]))
            i = j
            continue
        if ch in "+-*/%^(),":
            if ch == "(":
                tokens.append(("LPAREN", ch))
            elif ch == ")":
                tokens.append(("RPAREN", ch))
            elif ch == ",":
                tokens.append(("COMMA", ch))
            else:
                tokens.append(("OP", ch))
            i += 1
            continue
        raise ParseError(f"Unexpected character: {ch}")
    return insert_implicit_mul(tokens)


def insert_implicit_mul(tokens: Tokens) -> Tokens:
    if not tokens:
        return tokens
    out: Tokens = [tokens[0]]
    for prev, curr in zip(tokens, tokens[1:]):
        if needs_implicit_mul(prev, curr):
            out.append(("OP", "*"))
        out.append(curr)
    return out


def needs_implicit_mul(prev: Token, curr: Token) -> bool:
    prev_type = prev[0]
    curr_type = curr[0]
    if prev_type in ("NUMBER", "RADIX"):
        return curr_type in ("IDENT", "CONST", "FUNC", "LPAREN")
    if prev_type in ("IDENT", "CONST", "RPAREN"):
        return curr_type in ("NUMBER", "RADIX", "IDENT", "CONST", "FUNC", "LPAREN")
    return False


class Parser:
    def __init__(self, tokens: Tokens, config: Optional[Config] = None):
        self.tokens = tokens
        self.pos = 0
        self.config = config or Config()

    def peek(self) -> Optional[Token]:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def consume(self, kind: str, value: Optional[str] = None) -> Token:
        tok = self.peek()
        if tok is None:
            raise ParseError("Unexpected end of input")
        if tok[0] != kind or (value is not None and tok[1] != value):
            raise ParseError(f"Expected {kind} {value or ''}, got {tok}")
        self.pos += 1
        return tok

    def parse_expression(self) -> Expr:
        return self.parse_add_sub()

    def parse_add_sub(self) -> Expr:
        node = self.parse_mul_div()
        while True:
            tok = self.peek()
            if tok and tok[0] == "OP" and tok[1] in ADD_OPS:
                self.consume("OP")
                right = self.parse_mul_div()
                node = apply_binary(tok[1], node, right)
            else:
                break
        return node

    def parse_mul_div(self) -> Expr:
        node = self.parse_unary()
        while True:
            tok = self.peek()
            if tok and tok[0] == "OP" and tok[1] in MUL_OPS:
                self.consume("OP")
                right = self.parse_unary()
                node = apply_binary(tok[1], node, right)
            else:
                break
        return node

    def parse_unary(self) -> Expr:
        tok = self.peek()
        if tok and tok[0] == "OP" and tok[1] in ADD_OPS:
            self.consume("OP")
            expr = self.parse_unary()
            if tok[1] == "-":
                return apply_unary("neg", expr)
            return expr
        return self.parse_power()

    def parse_power(self) -> Expr:
        node = self.parse_primary()
        tok = self.peek()
        if tok and tok[0] == "OP" and tok[1] == "^":
            self.consume("OP")
            exponent = self.parse_unary()
            node = apply_binary("^", node, exponent)
        return node

    def parse_call(self, name: str) -> Expr:
        self.consume("LPAREN")
        args = [self.parse_expression()]
        while self.peek() == ("COMMA", ","):
            self.consume("COMMA")
            args.append(self.parse_expression())
        self.consume("RPAREN")
        if name == "log":
            if len(args) == 1:
                return apply_binary("log", Num(10), args[0])
            if len(args) == 2:
                return apply_binary("log", args[0], args[1])
            raise ParseError(f"log takes 1 or 2 arguments, got {len(args)}")
        if len(args) != 1:
            raise ParseError(f"{name} takes 1 argument, got {len(args)}")
        return apply_unary(name, args[0], self.config.angle_measure)

    def parse_primary(self) -> Expr:
        tok = self.peek()
        if tok is None:
            raise ParseError("Unexpected end of input")
        if tok[0] == "NUMBER":
            self.consume("NUMBER")
            return Num(parse_rational(tok[1]))
        if tok[0] == "RADIX":
            self.consume("RADIX")
            prefix, _, digits = tok[1].partition("#")
            return Num(parse_bigrational(digits, Radix.parse(prefix)))
        if tok[0] == "IDENT":
            self.consume("IDENT")
            return Var(tok[1])
        if tok[0] == "CONST":
            self.consume("CONST")
            return Const(Constant.parse(tok[1]))
        if tok[0] == "FUNC":
            self.consume("FUNC")
            return self.parse_call(tok[1])
        if tok[0] == "LPAREN":
            self.consume("LPAREN")
            expr = self.parse_expression()
            self.consume("RPAREN")
            return expr
        raise ParseError(f"Unexpected token: {tok}")


def parse(text: str, config: Optional[Config] = None) -> Expr:
    """Parse infix ``text`` into a canonical expression.

    Domain errors from the operators (``1/0``, ``sqrt(-1)``) propagate as the
    matching :class:`~guac.errors.GuacError`.
    """
    try:
        parser = Parser(tokenize(text), config)
        expr = parser.parse_expression()
        if parser.peek() is not None:
            raise ParseError("Unexpected trailing input")
    except BadInput as exc:
        logger.debug("could not parse %r: %s", text, exc)
        raise
    return expr
