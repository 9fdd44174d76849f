from __future__ import annotations

from typing import NamedTuple, Optional

from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.errors import SchemeTypeError
from twinscheme.evaluation.checks import arity_error, check_params
from twinscheme.evaluation.special_forms.lambda_form import check_body
from twinscheme.printer import write
from twinscheme.types.environment import Environment
from twinscheme.types.literal import syntax
from twinscheme.types.procedure import Closure
from twinscheme.types.symbol import Symbol


class DefineParts(NamedTuple):
    name: Symbol
    # (define name expr)
    expr: Optional[SExpression]
    # (define (name params...) body...)
    params: Optional[list[Symbol]]
    body: Optional[list[SExpression]]


def define_parts(args: list[SExpression]) -> DefineParts:
    if not args:
        raise arity_error("define", "a name and a value", args)

    target = syntax(args[0])
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise SchemeTypeError(f"Bad procedure name in define: {write(target)}")
        params = check_params("define", target[1:])
        body = check_body("define", args[1:])
        return DefineParts(target[0], None, params, body)

    if not isinstance(target, Symbol):
        raise SchemeTypeError(f"First argument to define must be a symbol: {write(target)}")
    if len(args) != 2:
        raise arity_error("define", "exactly two arguments", args)
    return DefineParts(target, args[1], None, None)


def define_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (define name value)
    (define (name params...) body...)
    Binds in the current scope, overwriting an existing binding there.
    """
    parts = define_parts(args)
    if parts.params is not None:
        env.define(parts.name, Closure(parts.params, parts.body, env, str(parts.name)))
    else:
        env.define(parts.name, evaluate_fn(parts.expr, env))
    return []
