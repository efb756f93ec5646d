# Core type aliases for schemelet's data model.
# Values are plain Python objects where Python has a fitting type (int, str,
# bool, list) plus small classes for the rest (Atom, Character, DottedList,
# procedures). The same objects represent code and data.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms and values are the same objects
SExpression = LispValue

# Evaluator function type, passed to special forms and apply
EvaluatorFn = Callable[..., LispValue]

# Native function behind a primitive procedure
PrimitiveFn = Callable[[list], LispValue]
