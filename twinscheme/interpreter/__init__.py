from __future__ import annotations

import logging
from typing import Callable, Literal

from twinscheme import NativeFn, SExpression, Value
from twinscheme.builtin.env_builtin import register
from twinscheme.config import EVALUATORS, get_default_evaluator
from twinscheme.errors import SchemeError
from twinscheme.evaluation.backend_impl import BACKENDS
from twinscheme.interpreter.backend import Backend
from twinscheme.printer import write
from twinscheme.reader.parser import read
from twinscheme.types.environment import Environment
from twinscheme.types.procedure import Native
from twinscheme.types.symbol import Symbol


class Interpreter:
    """
    Reads and evaluates twinscheme code with one of two evaluation strategies.
    Owns the root Environment, which persists across calls.
    """

    # Class-level default; None defers to the TWINSCHEME_EVALUATOR env var
    DefaultEvaluator: Literal['cps', 'ast_walk'] | None = None

    def __init__(self, evaluator: Literal['cps', 'ast_walk'] | None = None):
        self._logger = logging.getLogger("Interpreter")

        name = evaluator or self.DefaultEvaluator or get_default_evaluator()
        if name not in EVALUATORS:
            raise ValueError(f"Interpreter type must be one of {EVALUATORS}, got {name!r}")
        self.backend: Backend = BACKENDS[name]()
        self._logger.info("Using %s evaluator", name)

        self.root: Environment = Environment()
        register(self.root)

    @property
    def evaluator(self) -> str:
        return self.backend.name

    def run(self, values: list[SExpression], env: Environment | None = None) -> Value:
        """Evaluate parsed forms in order and return the last value ('() if none).

        The first error aborts the remaining forms.
        """
        target = env if env is not None else self.root
        result: Value = []
        for form in values:
            result = self.backend.eval(form, target)
        return result

    def execute(self, code: str) -> Value:
        """Parse and run `code`; raises SchemeSyntaxError or SchemeRuntimeError."""
        self._logger.debug("Executing %d characters with %s", len(code), self.evaluator)
        try:
            return self.run(read(code))
        except SchemeError as ex:
            self._logger.debug("Execution failed: %s", ex)
            raise

    def run_str(self, code: str) -> str:
        """Execute `code` and render the result in write form."""
        return write(self.execute(code))

    def define(self, name: str, fn: NativeFn) -> None:
        """Register a host native: fn(args, env, evaluate) gets unevaluated args."""
        self.root.define(Symbol(name), Native(name, fn))

    def define_primitive(self, name: str, fn: Callable[[list[Value]], Value]) -> None:
        """Register a host native that receives evaluated argument values."""
        self.root.define(Symbol(name), Native(name, fn, evaluates_args=True))
