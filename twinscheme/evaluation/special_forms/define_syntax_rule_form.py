"""Special form: define-syntax-rule.

Defines a non-hygienic substitution macro in the current scope.
"""

from __future__ import annotations

from twinscheme import EvaluatorFn, SExpression, Value
from twinscheme.errors import SchemeTypeError
from twinscheme.evaluation.checks import arity_error, check_params
from twinscheme.evaluation.special_forms.lambda_form import check_body
from twinscheme.printer import write
from twinscheme.types.environment import Environment
from twinscheme.types.literal import syntax
from twinscheme.types.macro import Macro
from twinscheme.types.symbol import Symbol


def define_syntax_rule_parts(args: list[SExpression]) -> Macro:
    """(define-syntax-rule (name params...) body...) -> Macro"""
    if not args:
        raise arity_error("define-syntax-rule", "a pattern and a template", args)

    pattern = syntax(args[0])
    if not isinstance(pattern, list) or not pattern or not isinstance(pattern[0], Symbol):
        raise SchemeTypeError(f"Macro pattern must be (name params...): {write(pattern)}")

    params = check_params("define-syntax-rule", pattern[1:])
    body = check_body("define-syntax-rule", args[1:])
    return Macro(str(pattern[0]), params, body)


def define_syntax_rule_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    macro = define_syntax_rule_parts(args)
    env.define(Symbol(macro.name), macro)
    return []
