"""Application helpers shared by both evaluators.

Keeping closure binding, arity checks and primitive calls in one place is what
lets the two evaluation strategies agree on scoping and on error text.
"""

from __future__ import annotations

from twinscheme import SExpression, Value
from twinscheme.errors import SchemeTypeError
from twinscheme.evaluation.checks import arity_error, exactly
from twinscheme.printer import write
from twinscheme.types.environment import Environment
from twinscheme.types.literal import Literal
from twinscheme.types.macro import Macro
from twinscheme.types.procedure import Closure, Native
from twinscheme.types.symbol import Symbol


def check_arity(fn: Closure, args: list[SExpression]) -> None:
    """Closures take exactly as many arguments as they have formals."""
    if len(args) != len(fn.formals):
        raise arity_error(fn.name or "procedure", exactly(len(fn.formals)), args)


def expand_macro(macro: Macro, args: list[SExpression]) -> list[SExpression]:
    if len(args) != len(macro.params):
        raise arity_error(macro.name, exactly(len(macro.params)), args)
    return macro.expand(args)


def bind_scope(outer: Environment, names: list[Symbol], values: list[Value]) -> Environment:
    """Bind names in a fresh child of `outer` and return the body scope.

    The body runs in a further child, so a body-level define creates a nested
    binding instead of overwriting a parameter slot.
    """
    params_env = Environment.new_child(outer)
    for name, value in zip(names, values):
        params_env.define(name, value)
    return Environment.new_child(params_env)


def bind_arguments(fn: Closure, values: list[Value]) -> Environment:
    check_arity(fn, values)
    return bind_scope(fn.env, fn.formals, values)


def call_primitive(fn: Native, values: list[Value]) -> Value:
    return fn.fn(values)


def literal_values(values: list[Value]) -> list[Literal]:
    """Wrap already-evaluated values so a special native can evaluate them again unchanged."""
    return [Literal(v) for v in values]


def check_apply_operands(fn: Value, args: Value) -> None:
    if not isinstance(fn, (Closure, Native)):
        raise SchemeTypeError(f"First argument to apply must be a procedure: {write(fn)}")
    if not isinstance(args, list):
        raise SchemeTypeError(f"Second argument to apply must be a list: {write(args)}")
