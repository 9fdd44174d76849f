from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.evaluation.checks import arity_error, check_params
from twinscheme.types.environment import Environment
from twinscheme.types.literal import syntax
from twinscheme.types.procedure import Closure
from twinscheme.types.symbol import Symbol


def check_body(name: str, body: list[SExpression]) -> list[SExpression]:
    if not body:
        raise arity_error(name, "a non-empty body", body)
    return list(body)


def lambda_parts(args: list[SExpression]) -> tuple[list[Symbol], list[SExpression]]:
    if not args:
        raise arity_error("lambda", "a parameter list and a body", args)
    return check_params("lambda", syntax(args[0])), check_body("lambda", args[1:])


def lambda_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    # (lambda (params...) body...) captures `env` itself, not a copy of it.
    params, body = lambda_parts(args)
    return Closure(params, body, env)
