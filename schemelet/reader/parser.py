"""
  s-expression reader

Ordered-alternative grammar with backtracking, built with pyparsing:

    expr     := string | character | number | atom | quoted | list | dotted
    list     := "(" [gap] [expr (sep expr)*] [gap] ")"
    dotted   := "(" [gap] (expr sep)+ "." sep expr [gap] ")"

Whitespace is significant (elements need a separator between them), so
pyparsing's implicit whitespace skipping is turned off on every element.
Emits Python values:

    - numbers -> int
    - strings -> str
    - #t / #f -> bool
    - symbols -> Atom
    - characters -> Character
    - lists -> list, dotted lists -> DottedList
    - 'x -> [Atom("quote"), x]
"""

from __future__ import annotations

import re
from typing import Optional

from pyparsing import (
    Forward,
    Literal,
    MatchFirst,
    OneOrMore,
    Opt,
    ParseBaseException,
    ParseFatalException,
    ParserElement,
    Regex,
    ZeroOrMore,
)

from schemelet import SExpression
from schemelet.types.errors import SchemeParseError
from schemelet.types.symbol import Atom, QUOTE
from schemelet.types.values import Character, DottedList

# Enable packrat parsing: list / dotted-list backtracking re-reads elements
ParserElement.enable_packrat()

NAMED_CHARS: dict[str, str] = {
    "altmode": "\x1b",
    "backnext": "\x1f",
    "backspace": "\b",
    "call": "\x1a",
    "linefeed": "\n",
    "newline": "\n",
    "page": "\f",
    "return": "\r",
    "rubout": "\x7f",
    "tab": "\t",
    "space": " ",
}

STRING_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "t": "\t",
    "n": "\n",
    "r": "\r",
}

RADIXES: dict[str, int] = {"x": 16, "o": 8, "d": 10, "b": 2}

SYMBOL_CHARS = r"!#$%&|*+\-/:<=>?@^_~"

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


# ------------------------
# Parse actions
# ------------------------
def _to_string(s: str, loc: int, toks) -> str:
    body = toks[0][1:-1]

    def unescape(match: re.Match) -> str:
        code = match.group(1)
        if code not in STRING_ESCAPES:
            raise ParseFatalException(
                s, loc + 1 + match.start(), f"unknown escape sequence '\\{code}'"
            )
        return STRING_ESCAPES[code]

    return _ESCAPE_RE.sub(unescape, body)


def _to_named_character(s: str, loc: int, toks) -> Character:
    name = toks[0][2:]
    char = NAMED_CHARS.get(name.lower())
    if char is None:
        raise ParseFatalException(s, loc, f"unrecognized character name '{name}'")
    return Character(char)


def _to_character(toks) -> Character:
    return Character(toks[0][2:])


def _to_number(toks) -> int:
    text = toks[0]
    if text.startswith("#"):
        return int(text[2:], RADIXES[text[1].lower()])
    return int(text)


def _to_atom(toks) -> SExpression:
    name = toks[0]
    if name == "#t":
        return True
    if name == "#f":
        return False
    return Atom(name)


# A parse action returning a bare list would splice its items into the
# enclosing results, so list values are wrapped in a one-element list.
def _to_list(toks) -> list:
    return [list(toks)]


def _to_quoted(toks) -> list:
    return [[QUOTE, toks[0]]]


def _to_dotted(toks) -> DottedList:
    return DottedList(list(toks[:-1]), toks[-1])


# ------------------------
# Grammar
# ------------------------
def _token(name: str, pattern: str, flags: int = 0) -> ParserElement:
    return Regex(pattern, flags).leave_whitespace().set_name(name)


def _literal(text: str) -> ParserElement:
    return Literal(text).leave_whitespace().suppress().set_name(repr(text))


# Element names appear in error messages, e.g. "Expected expression"
expr = Forward().leave_whitespace()

separator = _token("whitespace or comment", r"(?:\s|;[^\n]*)+").suppress().set_name(
    "whitespace or comment"
)
gap = Opt(separator)

string_literal = _token(
    "string", r'"(?:\\.|[^"\\])*"', re.DOTALL
).set_parse_action(_to_string)

named_character = _token(
    "character name", r"#\\[^\W\d_]{2,}"
).set_parse_action(_to_named_character)
literal_character = _token("character", r"#\\.", re.DOTALL).set_parse_action(_to_character)

number = _token(
    "number", r"#[xX][0-9a-fA-F]+|#[oO][0-7]+|#[dD][0-9]+|#[bB][01]+|[0-9]+"
).set_parse_action(_to_number)

atom = _token(
    "symbol", rf"(?:[^\W\d_]|[{SYMBOL_CHARS}])(?:[^\W\d_]|[0-9]|[{SYMBOL_CHARS}])*"
).set_parse_action(_to_atom)

quoted = (_literal("'") + expr).set_parse_action(_to_quoted).set_name("quoted expression")

proper_list = (
    _literal("(") + gap + Opt(expr + ZeroOrMore(separator + expr)) + gap + _literal(")")
).set_parse_action(_to_list).set_name("list")

dotted_list = (
    _literal("(")
    + gap
    + OneOrMore(expr + separator)
    + _literal(".")
    + separator
    + expr
    + gap
    + _literal(")")
).set_parse_action(_to_dotted).set_name("dotted list")

# The Forward stays unnamed so errors raised inside a list keep their message
expr <<= MatchFirst(
    [
        string_literal,
        named_character,
        literal_character,
        number,
        atom,
        quoted,
        proper_list,
        dotted_list,
    ]
).leave_whitespace(recursive=False).set_name("expression")

single_expr = (gap + expr + gap).parse_with_tabs()
optional_expr = (gap + Opt(expr) + gap).parse_with_tabs()
expr_list = (gap + Opt(expr + ZeroOrMore(separator + expr)) + gap).parse_with_tabs()


# ------------------------
# Entry points
# ------------------------
def _offending_token(text: str, loc: int) -> str:
    if loc >= len(text):
        return "end of input"
    match = re.compile(r"\S{1,20}").match(text, loc)
    return match.group(0) if match else text[loc]


def _run(grammar: ParserElement, text: str) -> list[SExpression]:
    try:
        return list(grammar.parse_string(text, parse_all=True))
    except ParseBaseException as err:
        raise SchemeParseError(
            err.msg, err.loc, err.lineno, err.col, _offending_token(text, err.loc)
        ) from None


def parse(text: str) -> SExpression:
    """Read exactly one expression, optionally surrounded by whitespace/comments."""
    return _run(single_expr, text)[0]


def parse_all(text: str) -> list[SExpression]:
    """Read zero or more expressions separated by whitespace/comments."""
    return _run(expr_list, text)


def parse_optional(text: str) -> Optional[SExpression]:
    """Read one expression, or return None for blank (or comment-only) input."""
    results = _run(optional_expr, text)
    return results[0] if results else None
