import pytest

from skippy.types.environment import Environment
from skippy.builtin.env_builtin import register
from skippy.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp(env):
    return Interpreter(env)


@pytest.fixture
def run(interp):
    """Evaluate one input line and return its printed form."""
    def _run(source: str) -> str:
        return str(interp.eval(source))
    return _run
