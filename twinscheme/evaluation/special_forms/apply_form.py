from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.evaluation.apply import (
    bind_arguments,
    call_primitive,
    check_apply_operands,
    literal_values,
)
from twinscheme.evaluation.checks import check_count
from twinscheme.evaluation.special_forms.progn_form import evaluate_sequence
from twinscheme.types.environment import Environment
from twinscheme.types.procedure import Closure


def apply_parts(args: list[SExpression]) -> tuple[SExpression, SExpression]:
    check_count("apply", args, 2, "exactly two arguments")
    return args[0], args[1]


def apply_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (apply fn args)
    The list elements are already values: closures bind them directly,
    primitives receive them, and special natives receive them as Literals so that
    evaluating an argument yields the value unchanged.
    """
    fn_expr, args_expr = apply_parts(args)
    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)
    check_apply_operands(fn_val, args_val)

    if isinstance(fn_val, Closure):
        return evaluate_sequence(fn_val.body, bind_arguments(fn_val, args_val), evaluate_fn)
    if fn_val.evaluates_args:
        return call_primitive(fn_val, list(args_val))
    return fn_val.fn(literal_values(args_val), env, evaluate_fn)
