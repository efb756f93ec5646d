"""Application engine for schemelet.

Procedure application lives here so the evaluator and the ``apply``
primitive share one implementation:
- Closures: arity check, call frame over the captured frame, body in order.
- Primitive procedures: the native function is called with the argument list.
Anything else is not applicable.
"""

from schemelet import LispValue, EvaluatorFn
from schemelet.types.errors import SchemeArityError, SchemeTypeError
from schemelet.types.lambda_fn import Closure, PrimitiveProcedure


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    The body forms are evaluated in order in the call frame and the last
    value is returned. There is no tail-call elimination: every nested call
    uses Python stack.
    """
    if not fn.accepts(len(args)):
        raise SchemeArityError(fn.arity, args)
    env = fn.extend_env(args)
    result = None
    for form in fn.body:
        result = evaluate_fn(form, env)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a PrimitiveProcedure.

    Errors raised by a primitive propagate unchanged.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, PrimitiveProcedure):
        return head.fn(list(args))
    else:
        raise SchemeTypeError("procedure", head)
