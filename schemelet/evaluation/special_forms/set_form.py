from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.types.symbol import Atom
from schemelet.types.environment import Environment
from schemelet.evaluation.special_forms.unmatched import UNMATCHED


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! name value)
    The value is evaluated before the binding is checked.
    """
    match tail:
        case [Atom(name=name), form]:
            value = evaluate_fn(form, env)
            return env.set_var(name, value)
    return UNMATCHED
