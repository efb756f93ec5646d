from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.types.symbol import Atom
from schemelet.types.values import DottedList
from schemelet.types.environment import Environment
from schemelet.evaluation.special_forms.lambda_form import make_closure
from schemelet.evaluation.special_forms.unmatched import UNMATCHED

DEFINE = Atom("define")


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)
    (define (name params... . rest) body...)
    Returns the bound value.
    """
    match tail:
        case [Atom(name=name), form]:
            value = evaluate_fn(form, env)
            return env.define_var(name, value)
        case [[Atom(name=name), *params], *body]:
            closure = make_closure(params, None, body, env, [DEFINE, *tail])
            return env.define_var(name, closure)
        case [DottedList(head=[Atom(name=name), *params], tail=rest), *body]:
            closure = make_closure(params, rest, body, env, [DEFINE, *tail])
            return env.define_var(name, closure)
    return UNMATCHED
