from __future__ import annotations

from twinscheme import SExpression, Value
from twinscheme.errors import SchemeRuntimeError
from twinscheme.evaluation.cps.machine import CpsMachine
from twinscheme.evaluation.evaluator import evaluate as tree_evaluate
from twinscheme.types.environment import Environment


class AstWalkBackend:
    name = "ast_walk"

    def eval(self, expr: SExpression, env: Environment) -> Value:
        try:
            return tree_evaluate(expr, env)
        except RecursionError:
            raise SchemeRuntimeError("Maximum recursion depth exceeded") from None


class CpsBackend:
    name = "cps"

    def __init__(self):
        self.machine = CpsMachine()

    def eval(self, expr: SExpression, env: Environment) -> Value:
        try:
            return self.machine.evaluate(expr, env)
        except RecursionError:
            # Only host natives and very deep data nest the host stack here
            raise SchemeRuntimeError("Maximum recursion depth exceeded") from None


BACKENDS = {
    AstWalkBackend.name: AstWalkBackend,
    CpsBackend.name: CpsBackend,
}
