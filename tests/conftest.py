import pytest

from egg.builtin.env_builtin import make_global_scope
from egg.interpreter import Interpreter

# Every test gets its own global scope; `printed` collects what `print`
# writes so tests can assert on the side effect without touching stdout.


@pytest.fixture
def printed():
    return []


@pytest.fixture
def global_scope(printed):
    return make_global_scope(printed.append)


@pytest.fixture
def scope(global_scope):
    return global_scope.child()


@pytest.fixture
def interp(global_scope):
    return Interpreter(global_scope=global_scope)
