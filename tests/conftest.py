import pytest

from mclisp import runtime_context
from mclisp.builtin.env_builtin import initialise_interpreter
from mclisp.evaluation.evaluator import evaluate
from mclisp.reader.parser import parse_string


@pytest.fixture(autouse=True)
def _reset_runtime_context():
    # Interpreter() and some tests flip process-global settings
    yield
    runtime_context.set_strict_arity(True)
    runtime_context.set_error_sink(None)


@pytest.fixture
def env():
    """A fresh global frame for each test."""
    return initialise_interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in the test's global frame; return the last value."""
    def _run(source: str, extended: bool = False):
        result = None
        for expr in parse_string(source, extended):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def errors():
    """A list that collects error sink messages."""
    return []
