"""Error taxonomy shared by the reader and the evaluator.

Every error carries the data needed to reproduce the failure; ``str()``
renders it for the REPL. Values are printed with the canonical printer,
imported lazily because the printer itself depends on the value types.
"""

from __future__ import annotations

from schemelet import LispValue


def _show(value: LispValue) -> str:
    from schemelet.printer import show

    return show(value)


class SchemeError(Exception):
    """ Base class for all schemelet errors"""
    pass


class SchemeArityError(SchemeError):
    """ Raised when a procedure or form receives the wrong number of arguments"""

    def __init__(self, expected: int, received: list[LispValue]):
        super().__init__(expected, received)
        self.expected = expected
        self.received = list(received)

    def __str__(self) -> str:
        found = " ".join(_show(v) for v in self.received)
        return f"Expected {self.expected} args; found values {found}"


class SchemeTypeError(SchemeError):
    """ Raised when a value has the wrong type for an operation"""

    def __init__(self, expected: str, value: LispValue):
        super().__init__(expected, value)
        self.expected = expected
        self.value = value

    def __str__(self) -> str:
        return f"Invalid type: expected {self.expected}, found {_show(self.value)}"


class SchemeParseError(SchemeError):
    """ Raised when source text does not follow the grammar"""

    def __init__(self, message: str, position: int, line: int, column: int, token: str):
        super().__init__(message, position, line, column, token)
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        self.token = token

    def __str__(self) -> str:
        return (
            f"Parse error at line {self.line}, column {self.column} "
            f"near {self.token!r}: {self.message}"
        )


class SchemeBadSpecialForm(SchemeError):
    """ Raised when a form matches no special form and cannot be applied"""

    def __init__(self, message: str, form: LispValue):
        super().__init__(message, form)
        self.message = message
        self.form = form

    def __str__(self) -> str:
        return f"{self.message}: {_show(self.form)}"


class SchemeUnboundVariable(SchemeError):
    """ Raised when a variable is read or assigned before it is bound"""

    def __init__(self, message: str, name: str):
        super().__init__(message, name)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return f"{self.message}: {self.name}"


class SchemeRuntimeError(SchemeError):
    """ Catch-all raised by primitives, e.g. I/O failures or division by zero"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
