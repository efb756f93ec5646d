"""Canonical printer.

``show`` renders any value as text the reader accepts again, except procedures
and atoms whose names are not symbol syntax (e.g. ``(string->symbol "a b")``
prints as ``a b``). ``display_form`` is the human-facing variant used by
``display``, printing strings and characters without quoting.
"""

from schemelet import LispValue
from schemelet.types.symbol import Atom
from schemelet.types.values import Character, DottedList
from schemelet.types.lambda_fn import Closure, PrimitiveProcedure

# Canonical names for printing; the reader accepts more (e.g. linefeed).
CHARACTER_NAMES: dict[str, str] = {
    "\x1b": "altmode",
    "\x1f": "backnext",
    "\b": "backspace",
    "\x1a": "call",
    "\n": "newline",
    "\r": "return",
    "\f": "page",
    "\x7f": "rubout",
    "\t": "tab",
    " ": "space",
}

_STRING_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def escape_string(text: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in text) + '"'


def show(value: LispValue) -> str:
    match value:
        case bool():
            return "#t" if value else "#f"
        case int():
            return str(value)
        case str():
            return escape_string(value)
        case Atom(name=name):
            return name
        case Character(char=char):
            return "#\\" + CHARACTER_NAMES.get(char, char)
        case list():
            return "(" + " ".join(show(v) for v in value) + ")"
        case DottedList(head=head, tail=tail):
            return "(" + " ".join(show(v) for v in head) + " . " + show(tail) + ")"
        case Closure() | PrimitiveProcedure():
            return str(value)
    return repr(value)


def display_form(value: LispValue) -> str:
    match value:
        case str():
            return value
        case Character(char=char):
            return char
    return show(value)
