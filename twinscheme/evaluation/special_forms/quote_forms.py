"""quote, quasiquote and the unquote markers.

Quasiquote runs in three steps shared by both evaluators:
collect_holes() validates the template and lists the (unquote e) /
(unquote-splicing e) sub-forms depth-first, left to right; the evaluator
evaluates those expressions in that order, calling check_splice() on each
spliced value as soon as it is produced; fill_template() rebuilds the
structure with the values.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from twinscheme import EvaluatorFn, SExpression, Value
from twinscheme.errors import SchemeRuntimeError, SchemeTypeError
from twinscheme.evaluation.checks import arity_error, check_count
from twinscheme.printer import write
from twinscheme.types.environment import Environment
from twinscheme.types.literal import syntax
from twinscheme.types.symbol import Symbol

UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


class Hole(NamedTuple):
    expr: SExpression
    splicing: bool


def _marker(form: SExpression) -> Symbol | None:
    if isinstance(form, list) and form and form[0] in (UNQUOTE, UNQUOTE_SPLICING):
        if len(form) != 2:
            raise arity_error(str(form[0]), "exactly one argument", form[1:])
        return form[0]
    return None


def collect_holes(template: SExpression) -> list[Hole]:
    holes: list[Hole] = []

    def walk(form: SExpression) -> None:
        marker = _marker(form)
        if marker == UNQUOTE:
            holes.append(Hole(form[1], False))
            return
        if marker == UNQUOTE_SPLICING:
            raise SchemeRuntimeError("unquote-splicing is only valid inside a list")
        if isinstance(form, list):
            for item in form:
                if _marker(item) == UNQUOTE_SPLICING:
                    holes.append(Hole(item[1], True))
                else:
                    walk(item)

    walk(template)
    return holes


def check_splice(value: Value) -> Value:
    if not isinstance(value, list):
        raise SchemeTypeError(f"unquote-splicing must produce a list: {write(value)}")
    return value


def fill_template(template: SExpression, values: list[Value]) -> Value:
    it: Iterator[Value] = iter(values)

    def build(form: SExpression) -> Value:
        if _marker(form) == UNQUOTE:
            return next(it)
        if isinstance(form, list):
            out: list[Value] = []
            for item in form:
                if _marker(item) == UNQUOTE_SPLICING:
                    out.extend(next(it))
                else:
                    out.append(build(item))
            return out
        return form

    return build(template)


def copy_datum(form: SExpression) -> Value:
    """Fresh copy of the list structure of `form`; atoms are shared."""
    if isinstance(form, list):
        return [copy_datum(x) for x in form]
    return form


def quote_parts(args: list[SExpression]) -> Value:
    check_count("quote", args, 1, "exactly one argument")
    # Program text must not alias values handed to host code
    return copy_datum(syntax(args[0]))


def quasiquote_parts(args: list[SExpression]) -> SExpression:
    check_count("quasiquote", args, 1, "exactly one argument")
    return syntax(args[0])


def quote_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return quote_parts(args)


def quasiquote_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    template = quasiquote_parts(args)
    values: list[Value] = []
    for hole in collect_holes(template):
        value = evaluate_fn(hole.expr, env)
        values.append(check_splice(value) if hole.splicing else value)
    return fill_template(template, values)


def unquote_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    raise SchemeRuntimeError("unquote is not valid outside of quasiquote")


def unquote_splice_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    raise SchemeRuntimeError("unquote-splicing is not valid outside of quasiquote")
