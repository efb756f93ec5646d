"""Runtime environment for schemelet.

A frame maps variable names to ``Cell`` objects. ``bind_vars`` derives a new
frame that shares every existing cell and adds fresh ones on top, so an
assignment through any frame holding a cell is seen by all of them. There is
no parent link: a derived frame carries its own copy of the name table, and
closures keep a reference to the frame object they were created in.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from schemelet import LispValue
from schemelet.types.errors import SchemeUnboundVariable


class Cell:
    """Mutable holder for the value of one binding."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class Environment:
    """One frame of name -> Cell bindings."""

    __slots__ = ("vars",)

    def __init__(self, cells: Optional[dict[str, Cell]] = None):
        self.vars: dict[str, Cell] = cells if cells is not None else {}

    def is_bound(self, name: str) -> bool:
        return name in self.vars

    def get_var(self, name: str) -> LispValue:
        """Return the value bound to `name`.

        Raises SchemeUnboundVariable if the name has no binding.
        """
        cell = self.vars.get(name)
        if cell is None:
            raise SchemeUnboundVariable("Getting an unbound variable", name)
        return cell.value

    def set_var(self, name: str, value: LispValue) -> LispValue:
        """Overwrite the cell bound to `name` and return `value`.

        Raises SchemeUnboundVariable if the name has no binding.
        """
        cell = self.vars.get(name)
        if cell is None:
            raise SchemeUnboundVariable("Setting an unbound variable", name)
        cell.value = value
        return value

    def define_var(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` in this frame, reusing its cell when it is already bound."""
        if self.is_bound(name):
            return self.set_var(name, value)
        self.vars[name] = Cell(value)
        return value

    def bind_vars(self, bindings: Iterable[tuple[str, LispValue]]) -> Environment:
        """Return a new frame with fresh cells for `bindings` over this frame's cells.

        When a name repeats inside `bindings` the first occurrence wins.
        """
        fresh: dict[str, Cell] = {}
        for name, value in bindings:
            if name not in fresh:
                fresh[name] = Cell(value)
        cells = dict(self.vars)
        cells.update(fresh)
        return Environment(cells)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {c.value!r}" for k, c in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
