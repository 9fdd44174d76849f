from typing import Optional

from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.evaluation.checks import arity_error
from twinscheme.types.boolean import is_truthy
from twinscheme.types.environment import Environment


def if_parts(args: list[SExpression]) -> tuple[SExpression, SExpression, Optional[SExpression]]:
    if len(args) not in (2, 3):
        raise arity_error("if", "two or three arguments", args)
    otherwise = args[2] if len(args) == 3 else None
    return args[0], args[1], otherwise


def if_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    cond, then, otherwise = if_parts(args)

    # Only #f is false
    if is_truthy(evaluate_fn(cond, env)):
        return evaluate_fn(then, env)
    if otherwise is None:
        return []
    return evaluate_fn(otherwise, env)
