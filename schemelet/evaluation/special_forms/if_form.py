from schemelet import EvaluatorFn
from schemelet import SExpression, LispValue
from schemelet.types.errors import SchemeArityError
from schemelet.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    match tail:
        case [predicate, consequent, alternative]:
            # Only boolean false is falsy; 0, "" and () all select the consequent
            if evaluate_fn(predicate, env) is False:
                return evaluate_fn(alternative, env)
            return evaluate_fn(consequent, env)
    raise SchemeArityError(3, tail)
