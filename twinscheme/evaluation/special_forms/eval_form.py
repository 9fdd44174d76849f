from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.evaluation.checks import check_count
from twinscheme.types.environment import Environment


def eval_parts(args: list[SExpression]) -> SExpression:
    check_count("eval", args, 1, "exactly one argument")
    return args[0]


def eval_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    # The datum is produced in the caller's scope but evaluated against the
    # root, so eval'd code never sees caller-local bindings.
    datum = evaluate_fn(eval_parts(args), env)
    return evaluate_fn(datum, env.root())
