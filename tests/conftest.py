import pytest

from twinscheme.interpreter import Interpreter

# Tests that take the `backend` fixture run once per evaluation strategy:
# 1) the tree-walking evaluator ["ast_walk"]
# 2) the trampolined continuation-passing evaluator ["cps"]
# Both must produce the same results and the same error text.


@pytest.fixture(params=["ast_walk", "cps"])
def backend(request):
    return request.param


@pytest.fixture
def interp(backend):
    return Interpreter(backend)
