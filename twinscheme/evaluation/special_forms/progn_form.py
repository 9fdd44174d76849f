from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.types.environment import Environment


def evaluate_sequence(
    forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Evaluate forms in order and return the last value; '() when empty."""
    result: Value = []
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def begin_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(begin e...)"""
    return evaluate_sequence(args, env, evaluate_fn)
