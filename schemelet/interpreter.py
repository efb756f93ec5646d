from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional

from schemelet import SExpression, LispValue, PrimitiveFn
from schemelet.config import get_load_roots
from schemelet.reader.parser import parse, parse_all
from schemelet.evaluation.evaluator import evaluate, make_global_environment
from schemelet.evaluation.apply import apply
from schemelet.types.errors import SchemeArityError, SchemeRuntimeError, SchemeTypeError
from schemelet.builtin.env_builtin import PRIMITIVES

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Global environment plus the entry points a REPL or file runner needs.

    The primitive table defaults to PRIMITIVES; `load` and `apply` are added
    on top because they call back into the evaluator.
    """
    def __init__(
        self,
        primitives: Optional[Mapping[str, PrimitiveFn]] = None,
        prelude: str | None = None,
    ):
        table = dict(PRIMITIVES if primitives is None else primitives)
        table.setdefault("load", self._load_builtin)
        table.setdefault("apply", self._apply_builtin)
        self.env = make_global_environment(table)

        if prelude:
            self.eval_all(prelude)

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate an already-parsed expression in the global environment."""
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Parse and evaluate a single expression."""
        return evaluate(parse(code), self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every expression in `code` in order; returns all results."""
        return [evaluate(expr, self.env) for expr in parse_all(code)]

    def bind_args(self, argv: Iterable[str]) -> None:
        """Expose program arguments as the list `args` in a frame over the globals."""
        self.env = self.env.bind_vars([("args", list(argv))])

    def resolve(self, filename: str) -> Path:
        """Find `filename` as given, then under each SCHEMELET_PATH root."""
        path = Path(filename)
        if path.is_absolute() or path.is_file():
            return path
        for root in get_load_roots():
            candidate = root / path
            if candidate.is_file():
                return candidate
        return path

    def load(self, filename: str) -> LispValue:
        """Evaluate every form of a file in the global environment.

        Returns the value of the last form, or the empty list for a file with
        no forms.
        """
        path = self.resolve(filename)
        logger.debug("Loading %s", path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as err:
            raise SchemeRuntimeError(f"Cannot load {filename}: {err.strerror or err}") from err
        result: LispValue = []
        for expr in parse_all(source):
            result = evaluate(expr, self.env)
        return result

    # --- Builtins that need the evaluator ---
    def _load_builtin(self, args: list[LispValue]) -> LispValue:
        """(load "file.scm")"""
        if len(args) != 1:
            raise SchemeArityError(1, args)
        filename = args[0]
        if not isinstance(filename, str):
            raise SchemeTypeError("string", filename)
        return self.load(filename)

    def _apply_builtin(self, args: list[LispValue]) -> LispValue:
        """(apply f arg... lst): call f with the args followed by the items of lst."""
        if len(args) < 2:
            raise SchemeArityError(2, args)
        fn, *leading, spread = args
        if not isinstance(spread, list):
            raise SchemeTypeError("list", spread)
        return apply(fn, [*leading, *spread], evaluate)
