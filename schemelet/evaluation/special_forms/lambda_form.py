from schemelet import SExpression, LispValue, EvaluatorFn
from schemelet.types.errors import SchemeBadSpecialForm
from schemelet.types.symbol import Atom
from schemelet.types.values import DottedList
from schemelet.types.lambda_fn import Closure
from schemelet.types.environment import Environment
from schemelet.evaluation.special_forms.unmatched import UNMATCHED

LAMBDA = Atom("lambda")


def make_closure(
    params: list[SExpression],
    rest: SExpression | None,
    body: list[SExpression],
    env: Environment,
    form: SExpression,
) -> Closure:
    """Build a Closure over `env`, checking that every parameter is a symbol
    and that the body has at least one form."""
    for param in params:
        if not isinstance(param, Atom):
            raise SchemeBadSpecialForm("Parameter is not a symbol", form)
    if rest is not None and not isinstance(rest, Atom):
        raise SchemeBadSpecialForm("Rest parameter is not a symbol", form)
    if not body:
        raise SchemeBadSpecialForm("Procedure body is empty", form)
    return Closure(
        [p.name for p in params],
        rest.name if rest is not None else None,
        body,
        env,
    )


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body...)
    (lambda (params... . rest) body...)
    (lambda rest body...)
    """
    match tail:
        case [list(params), *body]:
            return make_closure(params, None, body, env, [LAMBDA, *tail])
        case [DottedList(head=params, tail=rest), *body]:
            return make_closure(list(params), rest, body, env, [LAMBDA, *tail])
        case [Atom() as rest, *body]:
            return make_closure([], rest, body, env, [LAMBDA, *tail])
    return UNMATCHED
