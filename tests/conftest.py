import pytest

from zeus.interpreter import Interpreter
from zeus.types.environment import Environment
from zeus.builtin import env_builtin


# Most tests run source text through a fresh session. Tests that call
# builtins directly use `env`, a bare Environment with the builtins registered.


@pytest.fixture
def itp():
    return Interpreter()


@pytest.fixture
def env():
    env = Environment()
    env_builtin.register(env)
    return env
