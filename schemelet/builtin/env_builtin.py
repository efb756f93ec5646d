"""Built-in procedures for the schemelet runtime environment.

This module defines integer arithmetic, comparisons, pair and list
processing, equivalence, type predicates, string helpers and console
output. Each builtin takes the list of evaluated arguments; PRIMITIVES maps
the Lisp-visible names to them and is handed to make_global_environment.
"""

from __future__ import annotations

import operator
import sys
from typing import Callable

from schemelet import LispValue, PrimitiveFn
from schemelet.types.errors import SchemeArityError, SchemeRuntimeError, SchemeTypeError
from schemelet.types.lambda_fn import Closure, PrimitiveProcedure
from schemelet.types.symbol import Atom
from schemelet.types.values import Character, DottedList
from schemelet.printer import show, display_form
from schemelet.reader.parser import parse


# -------------------------------
# Unpacking
# -------------------------------
def unpack_num(value: LispValue) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemeTypeError("number", value)
    return value


def unpack_str(value: LispValue) -> str:
    if not isinstance(value, str):
        raise SchemeTypeError("string", value)
    return value


def unpack_bool(value: LispValue) -> bool:
    if not isinstance(value, bool):
        raise SchemeTypeError("boolean", value)
    return value


def _boolean(predicate: Callable[[LispValue], bool]) -> PrimitiveFn:
    def check(args: list[LispValue]) -> bool:
        if len(args) != 1:
            raise SchemeArityError(1, args)
        return predicate(args[0])

    return check


# -------------------------------
# Arithmetic
# -------------------------------
def _floor_div(a: int, b: int) -> int:
    if b == 0:
        raise SchemeRuntimeError("Division by zero")
    return a // b


def _floor_mod(a: int, b: int) -> int:
    if b == 0:
        raise SchemeRuntimeError("Division by zero")
    return a % b


def _quotient(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise SchemeRuntimeError("Division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _quotient(a, b)


def numeric_binop(op: Callable[[int, int], int]) -> PrimitiveFn:
    """Fold `op` left over two or more integer arguments."""

    def fold(args: list[LispValue]) -> int:
        if len(args) < 2:
            raise SchemeArityError(2, args)
        result = unpack_num(args[0])
        for arg in args[1:]:
            result = op(result, unpack_num(arg))
        return result

    return fold


def bool_binop(unpack: Callable[[LispValue], LispValue], op: Callable) -> PrimitiveFn:
    """Compare exactly two arguments after unpacking them with `unpack`."""

    def compare(args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise SchemeArityError(2, args)
        return bool(op(unpack(args[0]), unpack(args[1])))

    return compare


# -------------------------------
# Pairs and lists
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    match args:
        case [[first, *_]]:
            return first
        case [DottedList(head=head)]:
            return head[0]
        case [bad_arg]:
            raise SchemeTypeError("pair", bad_arg)
    raise SchemeArityError(1, args)


def cdr(args: list[LispValue]) -> LispValue:
    match args:
        case [[_, *rest]]:
            return rest
        case [DottedList(head=[_], tail=tail)]:
            return tail
        case [DottedList(head=[_, *rest], tail=tail)]:
            return DottedList(rest, tail)
        case [bad_arg]:
            raise SchemeTypeError("pair", bad_arg)
    raise SchemeArityError(1, args)


def cons(args: list[LispValue]) -> LispValue:
    """Prepend to a list; anything else as the second argument makes a dotted pair."""
    match args:
        case [head, list(items)]:
            return [head, *items]
        case [head, DottedList(head=items, tail=tail)]:
            return DottedList([head, *items], tail)
        case [head, tail]:
            return DottedList([head], tail)
    raise SchemeArityError(2, args)


def list_builtin(args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def length(args: list[LispValue]) -> int:
    match args:
        case [list(items)]:
            return len(items)
        case [bad_arg]:
            raise SchemeTypeError("list", bad_arg)
    raise SchemeArityError(1, args)


# -------------------------------
# Equivalence
# -------------------------------
def _same_kind(a: LispValue, b: LispValue) -> bool:
    # bool and int must not compare equal to each other
    return isinstance(a, bool) == isinstance(b, bool)


def is_eqv(a: LispValue, b: LispValue) -> bool:
    """Value equality for atomic data, element-wise for lists, identity for procedures."""
    if not _same_kind(a, b):
        return False
    match a, b:
        case (bool() | int() | str() | Atom() | Character(), _):
            return type(a) is type(b) and a == b
        case (list(), list()):
            return len(a) == len(b) and all(is_eqv(x, y) for x, y in zip(a, b))
        case (DottedList(), DottedList()):
            return is_eqv([*a.head, a.tail], [*b.head, b.tail])
        case (Closure() | PrimitiveProcedure(), _):
            return a is b
    return False


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: like eqv?, recursing through lists and dotted lists."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, DottedList) and isinstance(b, DottedList):
        return is_equal([*a.head, a.tail], [*b.head, b.tail])
    return is_eqv(a, b)


def eqv(args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise SchemeArityError(2, args)
    return is_eqv(args[0], args[1])


def equal(args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise SchemeArityError(2, args)
    return is_equal(args[0], args[1])


# -------------------------------
# Strings and symbols
# -------------------------------
def string_length(args: list[LispValue]) -> int:
    if len(args) != 1:
        raise SchemeArityError(1, args)
    return len(unpack_str(args[0]))


def string_append(args: list[LispValue]) -> str:
    return "".join(unpack_str(a) for a in args)


def symbol_to_string(args: list[LispValue]) -> str:
    """(symbol->string x) -> name of symbol x"""
    match args:
        case [Atom(name=name)]:
            return name
        case [bad_arg]:
            raise SchemeTypeError("symbol", bad_arg)
    raise SchemeArityError(1, args)


def string_to_symbol(args: list[LispValue]) -> Atom:
    """(string->symbol x) -> Atom named by string x"""
    if len(args) != 1:
        raise SchemeArityError(1, args)
    return Atom(unpack_str(args[0]))


# -------------------------------
# Console I/O
# -------------------------------
def display(args: list[LispValue]) -> list:
    """Write the argument in display form to stdout; returns the empty list."""
    if len(args) != 1:
        raise SchemeArityError(1, args)
    sys.stdout.write(display_form(args[0]))
    return []


def write(args: list[LispValue]) -> list:
    """Write the argument in re-readable form to stdout; returns the empty list."""
    if len(args) != 1:
        raise SchemeArityError(1, args)
    sys.stdout.write(show(args[0]))
    return []


def newline(args: list[LispValue]) -> list:
    if args:
        raise SchemeArityError(0, args)
    sys.stdout.write("\n")
    return []


def read(args: list[LispValue]) -> LispValue:
    """(read "text") parses one expression from a string."""
    if len(args) != 1:
        raise SchemeArityError(1, args)
    return parse(unpack_str(args[0]))


PRIMITIVES: dict[str, PrimitiveFn] = {
    "+": numeric_binop(operator.add),
    "-": numeric_binop(operator.sub),
    "*": numeric_binop(operator.mul),
    "/": numeric_binop(_floor_div),
    "mod": numeric_binop(_floor_mod),
    "quotient": numeric_binop(_quotient),
    "remainder": numeric_binop(_remainder),
    "=": bool_binop(unpack_num, operator.eq),
    "<": bool_binop(unpack_num, operator.lt),
    ">": bool_binop(unpack_num, operator.gt),
    "/=": bool_binop(unpack_num, operator.ne),
    ">=": bool_binop(unpack_num, operator.ge),
    "<=": bool_binop(unpack_num, operator.le),
    "&&": bool_binop(unpack_bool, lambda a, b: a and b),
    "||": bool_binop(unpack_bool, lambda a, b: a or b),
    "string=?": bool_binop(unpack_str, operator.eq),
    "string<?": bool_binop(unpack_str, operator.lt),
    "string>?": bool_binop(unpack_str, operator.gt),
    "string<=?": bool_binop(unpack_str, operator.le),
    "string>=?": bool_binop(unpack_str, operator.ge),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": list_builtin,
    "length": length,
    "eq?": eqv,
    "eqv?": eqv,
    "equal?": equal,
    "null?": _boolean(lambda x: isinstance(x, list) and not x),
    "pair?": _boolean(lambda x: isinstance(x, DottedList) or (isinstance(x, list) and bool(x))),
    "list?": _boolean(lambda x: isinstance(x, list)),
    "symbol?": _boolean(lambda x: isinstance(x, Atom)),
    "string?": _boolean(lambda x: isinstance(x, str)),
    "number?": _boolean(lambda x: isinstance(x, int) and not isinstance(x, bool)),
    "boolean?": _boolean(lambda x: isinstance(x, bool)),
    "char?": _boolean(lambda x: isinstance(x, Character)),
    "procedure?": _boolean(lambda x: isinstance(x, (Closure, PrimitiveProcedure))),
    "string-length": string_length,
    "string-append": string_append,
    "symbol->string": symbol_to_string,
    "string->symbol": string_to_symbol,
    "display": display,
    "write": write,
    "newline": newline,
    "read": read,
}
