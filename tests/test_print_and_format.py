import pytest

from schemelet.builtin.env_builtin import car
from schemelet.printer import display_form, escape_string, show
from schemelet.types.environment import Environment
from schemelet.types.errors import (
    SchemeArityError,
    SchemeBadSpecialForm,
    SchemeRuntimeError,
    SchemeTypeError,
    SchemeUnboundVariable,
)
from schemelet.types.lambda_fn import Closure, PrimitiveProcedure
from schemelet.types.symbol import Atom, QUOTE
from schemelet.types.values import Character, DottedList


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "#t"),
        (False, "#f"),
        (0, "0"),
        (42, "42"),
        (-3, "-3"),
        ("plain", '"plain"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\\b", '"a\\\\b"'),
        ("tab\there\nnext\r", '"tab\\there\\nnext\\r"'),
        (Atom("x"), "x"),
        (Atom("set!"), "set!"),
        (Character("a"), "#\\a"),
        (Character(" "), "#\\space"),
        (Character("\n"), "#\\newline"),
        (Character("\t"), "#\\tab"),
        (Character("\x7f"), "#\\rubout"),
        ([], "()"),
        ([1, [2, 3]], "(1 (2 3))"),
        ([QUOTE, Atom("a")], "(quote a)"),
        (DottedList([1, 2], 3), "(1 2 . 3)"),
        (DottedList([Atom("a")], [Atom("b")]), "(a . (b))"),
    ],
)
def test_show(value, expected):
    assert show(value) == expected


def test_show_procedures():
    assert show(PrimitiveProcedure("car", car)) == "<primitive car>"
    env = Environment()
    assert show(Closure(["x", "y"], "rest", [1], env)) == "(lambda (x y . rest) ...)"
    assert show(Closure(["x"], None, [1], env)) == "(lambda (x) ...)"
    assert show(Closure([], "args", [1], env)) == "(lambda args ...)"
    assert show([Closure([], None, [1], env)]) == "((lambda () ...))"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("raw text", "raw text"),
        (Character("a"), "a"),
        (Character("\n"), "\n"),
        (["nested", Character("c")], '("nested" #\\c)'),
        (7, "7"),
        (Atom("sym"), "sym"),
    ],
)
def test_display_form(value, expected):
    assert display_form(value) == expected


def test_escape_string():
    assert escape_string("") == '""'
    assert escape_string('"') == '"\\""'


@pytest.mark.parametrize(
    "error, expected",
    [
        (SchemeArityError(2, [1, 2, 3]), "Expected 2 args; found values 1 2 3"),
        (SchemeArityError(1, []), "Expected 1 args; found values "),
        (SchemeTypeError("number", "a"), 'Invalid type: expected number, found "a"'),
        (SchemeTypeError("pair", []), "Invalid type: expected pair, found ()"),
        (
            SchemeBadSpecialForm("Unrecognized special form", [Atom("x"), 1]),
            "Unrecognized special form: (x 1)",
        ),
        (SchemeUnboundVariable("Getting an unbound variable", "x"), "Getting an unbound variable: x"),
        (SchemeRuntimeError("Division by zero"), "Division by zero"),
    ],
)
def test_error_messages(error, expected):
    assert str(error) == expected


def test_atoms_print_their_name_verbatim():
    from schemelet.reader.parser import parse_all

    spaced = Atom("a b")
    assert show(spaced) == "a b"
    assert parse_all(show(spaced)) == [Atom("a"), Atom("b")]
