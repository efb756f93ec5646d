"""Value variants without a native Python counterpart.

Numbers, strings, booleans and proper lists use ``int``, ``str``, ``bool``
and ``list``; characters and improper lists need their own types so they
stay distinguishable from strings and lists.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemelet import LispValue


@dataclass(frozen=True)
class Character:
    """A single character, read from ``#\\a`` or ``#\\newline``."""

    char: str

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"Character expects exactly one code point, got {self.char!r}")


@dataclass(frozen=True)
class DottedList:
    """An improper list ``(a b . c)``: non-empty head plus a non-list tail."""

    head: tuple[LispValue, ...]
    tail: LispValue

    def __post_init__(self):
        object.__setattr__(self, "head", tuple(self.head))
