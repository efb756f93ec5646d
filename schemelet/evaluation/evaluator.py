"""Core evaluator for the schemelet interpreter.

Self-evaluating values return themselves, atoms are looked up, special forms
are dispatched on their head keyword, and every other non-empty list is a
procedure application with arguments evaluated left to right. Evaluation is
plain recursion; there is no trampoline.
"""

from __future__ import annotations

import logging
from typing import Mapping

from schemelet import SExpression, LispValue, PrimitiveFn
from schemelet.types.errors import SchemeBadSpecialForm
from schemelet.types.environment import Environment
from schemelet.types.lambda_fn import PrimitiveProcedure
from schemelet.types.symbol import Atom
from schemelet.types.values import Character, DottedList
from schemelet.evaluation.apply import apply
from schemelet.evaluation.special_forms import SPECIAL_FORMS, UNMATCHED

logger = logging.getLogger(__name__)


def make_global_environment(primitives: Mapping[str, PrimitiveFn]) -> Environment:
    """Return a fresh frame binding each name to a PrimitiveProcedure."""
    logger.debug("Binding %d primitives", len(primitives))
    return Environment().bind_vars(
        (name, PrimitiveProcedure(name, fn)) for name, fn in primitives.items()
    )


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        # bool is covered by int
        case str() | int() | Character() | DottedList() | []:
            return expr
        case Atom(name=name):
            return env.get_var(name)
        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Atom) and head.name in SPECIAL_FORMS:
                result = SPECIAL_FORMS[head.name](tail_args, env, evaluate)
                if result is not UNMATCHED:
                    return result
            # --- Application ---
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)
    raise SchemeBadSpecialForm("Unrecognized special form", expr)
