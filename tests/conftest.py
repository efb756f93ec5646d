import pytest

from schemelet.builtin.env_builtin import PRIMITIVES
from schemelet.evaluation.evaluator import evaluate, make_global_environment
from schemelet.interpreter import Interpreter
from schemelet.reader.parser import parse_all


@pytest.fixture
def env():
    """Fresh global environment holding the default primitive table."""
    return make_global_environment(PRIMITIVES)


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of the source in `env`; returns the last value."""

    def _run(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result

    return _run
