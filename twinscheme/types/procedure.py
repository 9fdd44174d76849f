"""Procedure values: host natives and user closures."""

from __future__ import annotations

from twinscheme import SExpression, NativeFn
from twinscheme.types.environment import Environment
from twinscheme.types.symbol import Symbol


class Native:
    """A host-provided procedure.

    With `evaluates_args=False` (special natives) `fn(args, env, evaluate)`
    receives the unevaluated argument expressions and decides itself what to
    evaluate. With `evaluates_args=True` (primitives) the evaluator evaluates
    the arguments left to right first and calls `fn(values)`.
    """

    __slots__ = ("name", "fn", "evaluates_args")

    def __init__(self, name: str, fn: NativeFn, evaluates_args: bool = False):
        self.name = name
        self.fn = fn
        self.evaluates_args = evaluates_args

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Native)
            and self.fn is other.fn
            and self.name == other.name
        )

    def __hash__(self) -> int:
        return hash((self.name, id(self.fn)))

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        return f"<native {self.name}>"


class Closure:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        # Shared, never copied: the closure sees later mutations of its scope
        self.env: Environment = env
        # Set by (define (name ...) ...); used in error messages
        self.name = name

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        params = " ".join(str(f) for f in self.formals)
        return f"<closure ({params})>"


def is_procedure(value) -> bool:
    return isinstance(value, (Native, Closure))
