from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.errors import SchemeTypeError
from twinscheme.evaluation.checks import check_count
from twinscheme.printer import write
from twinscheme.types.environment import Environment
from twinscheme.types.literal import syntax
from twinscheme.types.symbol import Symbol


def set_parts(args: list[SExpression]) -> tuple[Symbol, SExpression]:
    check_count("set!", args, 2, "exactly two arguments")
    name, expr = syntax(args[0]), args[1]
    if not isinstance(name, Symbol):
        raise SchemeTypeError(f"First argument to set! must be a symbol: {write(name)}")
    return name, expr


def set_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(set! name value) mutates the nearest scope that already binds name."""
    name, expr = set_parts(args)
    env.set(name, evaluate_fn(expr, env))
    return []
