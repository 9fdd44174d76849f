"""Tree-walking evaluator.

Implements the evaluation rules by direct recursion: an application recurses
into its head, its arguments and, for closures, the body. Host stack depth
therefore grows with nesting depth and with every call in tail position, so a
long-running tail loop ends in RecursionError; the backend reports that as a
RuntimeError. The continuation-passing evaluator in evaluation.cps has the
same semantics without that limit.
"""

from __future__ import annotations

from twinscheme import SExpression, Value
from twinscheme.evaluation.apply import bind_arguments, call_primitive, check_arity, expand_macro
from twinscheme.evaluation.checks import non_procedure_error
from twinscheme.evaluation.special_forms.progn_form import evaluate_sequence
from twinscheme.types.environment import Environment
from twinscheme.types.literal import Literal
from twinscheme.types.macro import Macro
from twinscheme.types.procedure import Closure, Native
from twinscheme.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> Value:
    """Evaluate one expression in `env`."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Literal():
            return expr.value
        case [head_expr, *args]:
            head = evaluate(head_expr, env)
            return apply_head(head, args, env)

    # Atoms, procedures, macros, custom handles and '() evaluate to themselves
    return expr


def apply_head(head: Value, args: list[SExpression], env: Environment) -> Value:
    """Apply an evaluated head to the unevaluated argument expressions."""
    if isinstance(head, Closure):
        check_arity(head, args)
        values = [evaluate(arg, env) for arg in args]
        return evaluate_sequence(head.body, bind_arguments(head, values), evaluate)

    if isinstance(head, Native):
        if head.evaluates_args:
            return call_primitive(head, [evaluate(arg, env) for arg in args])
        return head.fn(args, env, evaluate)

    if isinstance(head, Macro):
        # Expansion is evaluated at the use site, not in a new scope
        return evaluate_sequence(expand_macro(head, args), env, evaluate)

    raise non_procedure_error(head)
