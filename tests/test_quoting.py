import pytest

from schemelet.evaluation.evaluator import evaluate
from schemelet.types.errors import SchemeUnboundVariable
from schemelet.types.symbol import Atom, QUOTE
from schemelet.types.values import Character, DottedList


@pytest.mark.parametrize(
    "source, expected",
    [
        ("'a", Atom("a")),
        ("(quote a)", Atom("a")),
        ("'(1 2 3)", [1, 2, 3]),
        ("'(a (b c))", [Atom("a"), [Atom("b"), Atom("c")]]),
        ("'()", []),
        ("'(1 . 2)", DottedList([1], 2)),
        ("''a", [QUOTE, Atom("a")]),
        ("'(+ 1 2)", [Atom("+"), 1, 2]),
        ("'#\\a", Character("a")),
        ("'\"s\"", "s"),
    ],
)
def test_quote_returns_datum_unevaluated(run, source, expected):
    assert run(source) == expected


def test_quoted_symbol_is_not_looked_up(run):
    assert run("'undefined-name") == Atom("undefined-name")


def test_quote_with_wrong_shape_is_an_application(env):
    # (quote) and (quote a b) are not quote forms, so quote is looked up
    with pytest.raises(SchemeUnboundVariable):
        evaluate([QUOTE], env)
    with pytest.raises(SchemeUnboundVariable):
        evaluate([QUOTE, 1, 2], env)


def test_quoted_code_can_be_evaluated(run, env):
    form = run("'(* 6 7)")
    assert evaluate(form, env) == 42
