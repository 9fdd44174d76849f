from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.types.boolean import FALSE, TRUE, is_truthy
from twinscheme.types.environment import Environment


def and_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If all operands are truthy, returns the
    value of the last operand. With zero operands, returns #t.
    """
    result: Value = TRUE
    for expr in args:
        result = evaluate_fn(expr, env)
        if not is_truthy(result):
            return result
    return result


def or_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, returns #f. With zero operands, returns #f.
    """
    result: Value = FALSE
    for expr in args:
        result = evaluate_fn(expr, env)
        if is_truthy(result):
            return result
    return result
