from schemelet import SExpression, LispValue, EvaluatorFn
from schemelet.types.environment import Environment
from schemelet.evaluation.special_forms.unmatched import UNMATCHED


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated."""
    match tail:
        case [quoted]:
            return quoted
    return UNMATCHED
