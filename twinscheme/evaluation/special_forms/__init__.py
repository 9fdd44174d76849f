"""Registry of special forms.

Maps names to handler functions with the signature
`handler(args, env, evaluate_fn)`; `args` are the unevaluated argument
expressions. builtin.env_builtin.register binds each one in the root
environment as a Native; the continuation-passing evaluator recognises them
by handler identity and runs its own stack-safe step for each.
"""

from twinscheme.evaluation.special_forms.apply_form import apply_form
from twinscheme.evaluation.special_forms.define_form import define_form
from twinscheme.evaluation.special_forms.define_syntax_rule_form import define_syntax_rule_form
from twinscheme.evaluation.special_forms.eval_form import eval_form
from twinscheme.evaluation.special_forms.if_form import if_form
from twinscheme.evaluation.special_forms.lambda_form import lambda_form
from twinscheme.evaluation.special_forms.let_form import let_form
from twinscheme.evaluation.special_forms.logic_forms import and_form, or_form
from twinscheme.evaluation.special_forms.progn_form import begin_form
from twinscheme.evaluation.special_forms.quote_forms import (
    quasiquote_form,
    quote_form,
    unquote_form,
    unquote_splice_form,
)
from twinscheme.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    "define": define_form,
    "lambda": lambda_form,
    "λ": lambda_form,
    "if": if_form,
    "let": let_form,
    "set!": set_form,
    "begin": begin_form,
    "and": and_form,
    "or": or_form,
    "quote": quote_form,
    "quasiquote": quasiquote_form,
    "unquote": unquote_form,
    "unquote-splicing": unquote_splice_form,
    "apply": apply_form,
    "eval": eval_form,
    "define-syntax-rule": define_syntax_rule_form,
}
