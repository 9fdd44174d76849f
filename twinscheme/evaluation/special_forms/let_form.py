from twinscheme import EvaluatorFn
from twinscheme import SExpression, Value
from twinscheme.errors import SchemeTypeError
from twinscheme.evaluation.apply import bind_scope
from twinscheme.evaluation.checks import arity_error
from twinscheme.evaluation.special_forms.lambda_form import check_body
from twinscheme.evaluation.special_forms.progn_form import evaluate_sequence
from twinscheme.printer import write
from twinscheme.types.environment import Environment
from twinscheme.types.literal import syntax
from twinscheme.types.symbol import Symbol


def let_parts(
    args: list[SExpression],
) -> tuple[list[Symbol], list[SExpression], list[SExpression]]:
    """
    (let ((var1 val1) (var2 val2) ...) body...)
    => (names, value expressions, body)
    """
    if not args:
        raise arity_error("let", "a binding list and a body", args)

    bindings = syntax(args[0])
    if not isinstance(bindings, list):
        raise SchemeTypeError(f"Let bindings must be a list: {write(bindings)}")

    names: list[Symbol] = []
    exprs: list[SExpression] = []
    for b in bindings:
        if not isinstance(b, list) or len(b) != 2 or not isinstance(b[0], Symbol):
            raise SchemeTypeError(f"Let binding must be a (name value) pair: {write(b)}")
        names.append(b[0])
        exprs.append(b[1])

    return names, exprs, check_body("let", args[1:])


def let_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    names, exprs, body = let_parts(args)
    values = [evaluate_fn(e, env) for e in exprs]
    return evaluate_sequence(body, bind_scope(env, names, values), evaluate_fn)
