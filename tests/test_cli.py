import io
import logging

import pytest

from schemelet import __version__
from schemelet.cli import main, run_repl
from schemelet.interpreter import Interpreter


def _feed(lines, prompts=None):
    """Stand-in for input(): returns lines in order, then raises EOFError."""
    remaining = iter(lines)

    def read_line(prompt):
        if prompts is not None:
            prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line


# -----------------------------------------------------
# One expression / file mode
# -----------------------------------------------------


def test_evaluate_one_expression(capsys):
    assert main(["(+ 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_one_expression_prints_with_show(capsys):
    assert main(['(list "a" #\\b (quote c))']) == 0
    assert capsys.readouterr().out == '("a" #\\b c)\n'


def test_one_expression_error(capsys):
    assert main(["(car '())"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid type: expected pair, found ()" in captured.err


def test_one_expression_parse_error(capsys):
    assert main(["(+ 1"]) == 1
    assert "Parse error" in capsys.readouterr().err


def test_run_file_with_args(tmp_path, capsys):
    script = tmp_path / "main.scm"
    script.write_text('(display "running")\n(newline)\n(car args)\n')
    assert main([str(script), "first", "second"]) == 0
    assert capsys.readouterr().out == 'running\n"first"\n'


def test_run_file_without_args(tmp_path, capsys):
    script = tmp_path / "main.scm"
    script.write_text("(define (f) args) (f)")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "()\n"


def test_run_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.scm")]) == 1
    assert "Cannot load" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_log_level_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("LOGLEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    captured = {}
    assert main(["(+ 1 1)"]) == 0
    assert captured["level"] == logging.DEBUG


# -----------------------------------------------------
# REPL
# -----------------------------------------------------


def test_repl_session():
    out = io.StringIO()
    lines = ["(define x 2)", "", "   ", "(* x 21)", "(car '())", "x", "quit", "(never)"]
    assert run_repl(Interpreter(), _feed(lines), out) == 0
    assert out.getvalue() == "2\n42\nInvalid type: expected pair, found ()\n2\n"


def test_repl_reports_parse_errors_and_continues():
    out = io.StringIO()
    assert run_repl(Interpreter(), _feed(["(1 2", "'ok", "quit"]), out) == 0
    first, second = out.getvalue().splitlines()
    assert first.startswith("Parse error at line 1")
    assert second == "ok"


def test_repl_exits_on_end_of_input():
    out = io.StringIO()
    assert run_repl(Interpreter(), _feed(["1"]), out) == 0
    assert out.getvalue() == "1\n\n"


def test_repl_uses_configured_prompt(monkeypatch):
    monkeypatch.setenv("SCHEMELET_PROMPT", "> ")
    prompts = []
    run_repl(Interpreter(), _feed(["1", "quit"], prompts), io.StringIO())
    assert prompts == ["> ", "> "]


def test_repl_default_prompt(monkeypatch):
    monkeypatch.delenv("SCHEMELET_PROMPT", raising=False)
    prompts = []
    run_repl(Interpreter(), _feed(["quit"], prompts), io.StringIO())
    assert prompts == ["Lisp>>> "]


def test_repl_survives_runaway_recursion():
    out = io.StringIO()
    lines = ["(define (spin n) (spin n))", "(spin 1)", "(+ 1 1)", "quit"]
    assert run_repl(Interpreter(), _feed(lines), out) == 0
    assert out.getvalue().splitlines()[1:] == ["Maximum recursion depth exceeded", "2"]
