import pytest

from pycombinator.builtin.env_builtin import default_global_environment
from pycombinator.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with the default primitives."""
    return default_global_environment()


@pytest.fixture
def interp():
    return Interpreter()
