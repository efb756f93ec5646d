"""Procedure values: closures built by lambda/define and host primitives."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from schemelet import SExpression, LispValue, PrimitiveFn
from schemelet.types.environment import Environment


class PrimitiveProcedure:
    """A procedure implemented in Python: ``fn(args) -> value``."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __str__(self) -> str:
        return f"<primitive {self.name}>"

    def __repr__(self) -> str:
        return str(self)


class Closure:
    """A first-class procedure with fixed parameters, an optional rest
    parameter, a body and the environment frame it was created in.

    The environment is held by reference, never copied: later assignments
    to that frame are visible to the closure.
    """

    __slots__ = ("params", "rest", "body", "env")

    def __init__(
        self,
        params: list[str],
        rest: Optional[str],
        body: list[SExpression],
        env: Environment,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.rest: Optional[str] = rest
        self.body: tuple[SExpression, ...] = tuple(body)
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def accepts(self, count: int) -> bool:
        if self.rest is None:
            return count == self.arity
        return count >= self.arity

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda ")
            if self.params or self.rest is None:
                buffer.write("(")
                buffer.write(" ".join(self.params))
                if self.rest is not None:
                    buffer.write(" . ")
                    buffer.write(self.rest)
                buffer.write(")")
            else:
                buffer.write(self.rest)
            buffer.write(" ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    # --- Evaluation helpers ---
    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values over the captured frame and return the call frame.

        The rest parameter gets a fresh cell of its own, so it never writes
        through to a captured binding of the same name.
        """
        env = self.env.bind_vars(zip(self.params, args))
        if self.rest is not None:
            env = env.bind_vars([(self.rest, list(args[self.arity:]))])
        return env
