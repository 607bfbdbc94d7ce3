import pytest

from guac.angle import AngleMeasure
from guac.config import Config
from guac.constant import Constant
from guac.display import display
from guac.errors import BadInput, BadTan, Complex, DivideByZero, ParseError
from guac.expr import ONE, ZERO, Const, Log, Num, Power, Product, Sin, Sum, Var, rational
from guac.parser import parse, tokenize

x = Var("x")
y = Var("y")


def test_tokenize_inserts_implicit_multiplication():
    assert tokenize("2x") == [("NUMBER", "2"), ("OP", "*"), ("IDENT", "x")]
    assert tokenize("sin(pi)") == [("FUNC", "sin"), ("LPAREN", "("), ("CONST", "pi"), ("RPAREN", ")")]
    assert tokenize("(1)(2)") == [
        ("LPAREN", "("),
        ("NUMBER", "1"),
        ("RPAREN", ")"),
        ("OP", "*"),
        ("LPAREN", "("),
        ("NUMBER", "2"),
        ("RPAREN", ")"),
    ]


def test_tokenize_reads_exponent_notation():
    assert tokenize("2e3") == [("NUMBER", "2e3")]
    assert tokenize("2e") == [("NUMBER", "2"), ("OP", "*"), ("CONST", "e")]


def test_tokenize_splits_words_into_letters():
    assert tokenize("xy") == [("IDENT", "x"), ("OP", "*"), ("IDENT", "y")]
    assert tokenize("eπ") == [("CONST", "e"), ("OP", "*"), ("CONST", "π")]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", rational(3, 2)),
        ("2e3", Num(2000)),
        ("1.5e-1", rational(3, 20)),
        ("2E+2", Num(200)),
        ("2e", Product((Num(2), Const(Constant.E)))),
        ("2e-x", Sum((Product((Num(2), Const(Constant.E))), Product((Num(-1), x))))),
        ("2/4", rational(1, 2)),
        ("2^3^2", Num(512)),
        ("-2^2", Num(-4)),
        ("2^-1", rational(1, 2)),
        ("7 % 3", ONE),
        ("x - x", ZERO),
        ("x/x", ONE),
        ("2x + 3x", Product((Num(5), x))),
        ("xy", Product((x, y))),
        ("2 x", Product((Num(2), x))),
        ("hex#ff", Num(255)),
        ("g#ff", Num(255)),
        ("2#101", Num(5)),
        ("oct#0.4", rational(1, 2)),
        ("hex#10 + 1", Num(17)),
        ("pi", Const(Constant.PI)),
        ("e", Const(Constant.E)),
        ("hbar", Const(Constant.HBAR)),
        ("c", Var("c")),
        ("log(100)", Num(2)),
        ("log(2, 8)", Num(3)),
        ("log(10, 7)", Log(Num(10), Num(7))),
        ("ln(e)", ONE),
        ("sqrt(8)", Power(Num(8), rational(1, 2))),
        ("cbrt(27)", Num(3)),
        ("abs(-3)", Num(3)),
        ("sin(x)", Sin(x, AngleMeasure.RADIAN)),
        ("sin(pi/6)", rational(1, 2)),
        ("cos(2pi)", ONE),
    ],
)
def test_parse(text, expected):
    assert parse(text) == expected


@pytest.mark.parametrize(
    "text, shown",
    [
        ("2x + 3x + sin(pi/6)", "5x+1/2"),
        ("2(x+1)", "2x+2"),
        ("x^2 * x^3", "x^5"),
        ("x/(2y)", "x/(2y)"),
        ("1/sqrt(2)", "1/sqrt(2)"),
        ("x - y", "x-y"),
    ],
)
def test_parse_then_display(text, shown):
    assert display(parse(text)) == shown


def test_angle_measure_comes_from_config():
    degrees = Config(angle_measure=AngleMeasure.DEGREE)
    assert parse("sin(90)", degrees) == ONE
    assert parse("asin(1/2)", degrees) == Num(30)
    assert parse("sin(x)", degrees) == Sin(x, AngleMeasure.DEGREE)


@pytest.mark.parametrize("text", ["", "2 +", "2 $ 3", "(1", "1)", "2 3", "sin()", "sin(1, 2)", "log(1, 2, 3)"])
def test_parse_errors(text):
    with pytest.raises(ParseError):
        parse(text)


def test_bad_radix_literal_is_bad_input():
    with pytest.raises(BadInput):
        parse("bin#102")


@pytest.mark.parametrize(
    "text, error",
    [
        ("1/0", DivideByZero),
        ("0^-1", DivideByZero),
        ("sqrt(-4)", Complex),
        ("tan(pi/2)", BadTan),
        ("asin(2)", Complex),
    ],
)
def test_domain_errors_propagate(text, error):
    with pytest.raises(error):
        parse(text)
