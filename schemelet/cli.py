"""
schemelet command line entry point

    schemelet                      # interactive REPL
    schemelet "(+ 1 2)"            # evaluate one expression and print it
    schemelet script.scm a b       # load a file with args bound to ("a" "b")
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

# Readline support for line editing and history in input()
try:
    import readline  # noqa: F401
except ImportError:
    pass

from schemelet import __version__
from schemelet.config import get_log_level, get_prompt, get_recursion_limit
from schemelet.interpreter import Interpreter
from schemelet.printer import escape_string, show
from schemelet.reader.parser import parse_optional
from schemelet.types.errors import SchemeError

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"
RECURSION_MESSAGE = "Maximum recursion depth exceeded"


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="schemelet",
        description="A small Scheme interpreter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Start the REPL
  %(prog)s "(+ 1 2)"            # Evaluate one expression
  %(prog)s script.scm a b       # Run a file; (car args) is "a"
        """,
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="expression (starting with '(') or file to run",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="arguments bound to `args` when running a file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run_one(interp: Interpreter, expression: str, out: Optional[TextIO] = None) -> int:
    """Evaluate a single expression and print the result."""
    out = out or sys.stdout
    try:
        print(show(interp.eval(expression)), file=out)
    except SchemeError as err:
        print(err, file=sys.stderr)
        return 1
    except RecursionError:
        print(RECURSION_MESSAGE, file=sys.stderr)
        return 1
    return 0


def run_file(
    interp: Interpreter,
    filename: str,
    argv: Sequence[str],
    out: Optional[TextIO] = None,
) -> int:
    """Bind `args`, then evaluate (load "filename") and print its value."""
    interp.bind_args(argv)
    return run_one(interp, f"(load {escape_string(filename)})", out)


def run_repl(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """Read-eval-print until `quit` or end of input."""
    out = out or sys.stdout
    prompt = get_prompt()
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            print(file=out)
            return 0
        if line.strip() == QUIT_COMMAND:
            return 0
        try:
            expr = parse_optional(line)
            if expr is None:
                continue
            print(show(interp.evaluate(expr)), file=out)
        except SchemeError as err:
            print(err, file=out)
        except RecursionError:
            print(RECURSION_MESSAGE, file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for schemelet"""
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    limit = get_recursion_limit()
    if limit is not None:
        logger.debug("Setting recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.source is None:
        return run_repl(interp)
    if args.source.startswith("("):
        return run_one(interp, args.source)
    return run_file(interp, args.source, args.args)


if __name__ == "__main__":
    sys.exit(main())
