"""Continuation-passing evaluator driven by a trampoline.

Control state lives in data instead of on the host stack. The loop in
`CpsMachine.evaluate` holds a state and an explicit stack of continuation
frames (evaluation.cps.frames). A state is either

    (expr, env)    evaluate expr in env next
    (value, None)  hand value to the frame on top of the stack

Every step returns the next state and the loop iterates; nothing re-enters
the loop for a tail transition. Non-tail sub-evaluations push a frame that
remembers what to do with the result. Applying a closure in tail position
yields (body, new env) with the stack left exactly as the caller had it, so a
tail-recursive loop runs in constant stack depth.

Special forms are recognised by their handler function and get a dedicated
step here. The shared *_parts helpers validate them, so error text matches
the tree-walking evaluator. Host natives that are not special forms are
called with a nested trampoline as their `evaluate`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from twinscheme import SExpression, Value
from twinscheme.evaluation.apply import (
    bind_arguments,
    bind_scope,
    call_primitive,
    check_apply_operands,
    check_arity,
    expand_macro,
    literal_values,
)
from twinscheme.evaluation.checks import non_procedure_error
from twinscheme.evaluation.cps.frames import (
    ApplyArguments,
    ApplyFunction,
    ApplyHead,
    Assign,
    Branch,
    Define,
    EvalArgs,
    EvalInRoot,
    Frame,
    LetBindings,
    Logic,
    Quasi,
    Sequence,
)
from twinscheme.evaluation.special_forms.apply_form import apply_form, apply_parts
from twinscheme.evaluation.special_forms.define_form import define_form, define_parts
from twinscheme.evaluation.special_forms.define_syntax_rule_form import (
    define_syntax_rule_form,
    define_syntax_rule_parts,
)
from twinscheme.evaluation.special_forms.eval_form import eval_form, eval_parts
from twinscheme.evaluation.special_forms.if_form import if_form, if_parts
from twinscheme.evaluation.special_forms.lambda_form import lambda_form, lambda_parts
from twinscheme.evaluation.special_forms.let_form import let_form, let_parts
from twinscheme.evaluation.special_forms.logic_forms import and_form, or_form
from twinscheme.evaluation.special_forms.progn_form import begin_form
from twinscheme.evaluation.special_forms.quote_forms import (
    check_splice,
    collect_holes,
    fill_template,
    quasiquote_form,
    quasiquote_parts,
    quote_form,
    quote_parts,
)
from twinscheme.evaluation.special_forms.set_form import set_form, set_parts
from twinscheme.types.boolean import FALSE, TRUE, is_truthy
from twinscheme.types.environment import Environment
from twinscheme.types.literal import Literal
from twinscheme.types.macro import Macro
from twinscheme.types.procedure import Closure, Native
from twinscheme.types.symbol import Symbol

# (expr, env) to evaluate, or (value, None) to return
State = tuple[Value, Optional[Environment]]
Stack = list[Frame]


def _value(v: Value) -> State:
    return v, None


class CpsMachine:
    """Trampolined evaluator; one instance can serve any number of runs."""

    def __init__(self):
        self._logger = logging.getLogger("CpsMachine")
        # Largest frame stack seen by the most recent run
        self.peak_depth = 0
        self._special: dict[Callable, Callable[[list, Environment, Stack], State]] = {
            define_form: self._define,
            lambda_form: self._lambda,
            if_form: self._if,
            let_form: self._let,
            set_form: self._set,
            begin_form: self._begin,
            and_form: self._and,
            or_form: self._or,
            quote_form: self._quote,
            quasiquote_form: self._quasiquote,
            apply_form: self._apply,
            eval_form: self._eval,
            define_syntax_rule_form: self._define_syntax_rule,
        }

    # ----------------- Trampoline -----------------
    def evaluate(self, expr: SExpression, env: Environment) -> Value:
        """Run the loop until the frame stack is empty and a value is returned."""
        stack: Stack = []
        peak = 0
        state: State = (expr, env)
        while True:
            x, e = state
            if e is not None:
                state = self._step(x, e, stack)
            elif stack:
                state = self._resume(stack.pop(), x, stack)
            else:
                self.peak_depth = peak
                self._logger.debug("run finished, peak frame depth %d", peak)
                return x
            if len(stack) > peak:
                peak = len(stack)

    def _step(self, expr: SExpression, env: Environment, stack: Stack) -> State:
        if isinstance(expr, Symbol):
            return _value(env.lookup(expr))
        if isinstance(expr, Literal):
            return _value(expr.value)
        if isinstance(expr, list) and expr:
            stack.append(ApplyHead(expr[1:], env))
            return expr[0], env
        return _value(expr)

    def _resume(self, frame: Frame, value: Value, stack: Stack) -> State:
        match frame:
            case ApplyHead(args, env):
                return self._apply_head(value, args, env, stack)

            case EvalArgs(proc, exprs, env, values):
                values.append(value)
                if len(values) < len(exprs):
                    stack.append(frame)
                    return exprs[len(values)], env
                return self._apply_values(proc, values, stack)

            case Sequence(exprs, index, env):
                return self._sequence(exprs, index, env, stack)

            case Branch(then, otherwise, env):
                if is_truthy(value):
                    return then, env
                if otherwise is None:
                    return _value([])
                return otherwise, env

            case Define(name, env):
                env.define(name, value)
                return _value([])

            case Assign(name, env):
                env.set(name, value)
                return _value([])

            case LetBindings(names, exprs, body, env, values):
                values.append(value)
                if len(values) < len(exprs):
                    stack.append(frame)
                    return exprs[len(values)], env
                return self._sequence(body, 0, bind_scope(env, names, values), stack)

            case Logic(exprs, index, env, is_and):
                if is_truthy(value) != is_and:
                    return _value(value)
                return self._logic(exprs, index, env, is_and, stack)

            case Quasi(template, holes, env, values):
                hole = holes[len(values)]
                values.append(check_splice(value) if hole.splicing else value)
                if len(values) < len(holes):
                    stack.append(frame)
                    return holes[len(values)].expr, env
                return _value(fill_template(template, values))

            case ApplyFunction(list_expr, env):
                stack.append(ApplyArguments(value, env))
                return list_expr, env

            case ApplyArguments(proc, env):
                check_apply_operands(proc, value)
                return self._apply_list(proc, list(value), env, stack)

            case EvalInRoot(root):
                return value, root

        raise TypeError(f"Unknown continuation frame: {frame!r}")

    # ----------------- Application -----------------
    def _apply_head(self, head: Value, args: list[SExpression], env: Environment, stack: Stack) -> State:
        if isinstance(head, Closure):
            check_arity(head, args)
            return self._eval_args(head, args, env, stack)

        if isinstance(head, Native):
            if head.evaluates_args:
                return self._eval_args(head, args, env, stack)
            step = self._special.get(head.fn)
            if step is not None:
                return step(args, env, stack)
            return _value(head.fn(args, env, self.evaluate))

        if isinstance(head, Macro):
            return self._sequence(expand_macro(head, args), 0, env, stack)

        raise non_procedure_error(head)

    def _eval_args(self, proc: Value, args: list[SExpression], env: Environment, stack: Stack) -> State:
        if not args:
            return self._apply_values(proc, [], stack)
        stack.append(EvalArgs(proc, args, env))
        return args[0], env

    def _apply_values(self, proc: Value, values: list[Value], stack: Stack) -> State:
        if isinstance(proc, Closure):
            # Tail transition: the caller's frames stay as they are
            return self._sequence(proc.body, 0, bind_arguments(proc, values), stack)
        return _value(call_primitive(proc, values))

    def _apply_list(self, proc: Value, values: list[Value], env: Environment, stack: Stack) -> State:
        if isinstance(proc, Closure) or proc.evaluates_args:
            return self._apply_values(proc, values, stack)
        literals = literal_values(values)
        step = self._special.get(proc.fn)
        if step is not None:
            return step(literals, env, stack)
        return _value(proc.fn(literals, env, self.evaluate))

    def _sequence(self, exprs: list[SExpression], index: int, env: Environment, stack: Stack) -> State:
        if not exprs:
            return _value([])
        if index < len(exprs) - 1:
            stack.append(Sequence(exprs, index + 1, env))
        return exprs[index], env

    def _logic(self, exprs: list[SExpression], index: int, env: Environment, is_and: bool, stack: Stack) -> State:
        if index < len(exprs) - 1:
            stack.append(Logic(exprs, index + 1, env, is_and))
        return exprs[index], env

    # ----------------- Special forms -----------------
    def _define(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        parts = define_parts(args)
        if parts.params is not None:
            env.define(parts.name, Closure(parts.params, parts.body, env, str(parts.name)))
            return _value([])
        stack.append(Define(parts.name, env))
        return parts.expr, env

    def _lambda(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        params, body = lambda_parts(args)
        return _value(Closure(params, body, env))

    def _if(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        cond, then, otherwise = if_parts(args)
        stack.append(Branch(then, otherwise, env))
        return cond, env

    def _let(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        names, exprs, body = let_parts(args)
        if not exprs:
            return self._sequence(body, 0, bind_scope(env, names, []), stack)
        stack.append(LetBindings(names, exprs, body, env))
        return exprs[0], env

    def _set(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        name, expr = set_parts(args)
        stack.append(Assign(name, env))
        return expr, env

    def _begin(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        return self._sequence(args, 0, env, stack)

    def _and(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        if not args:
            return _value(TRUE)
        return self._logic(args, 0, env, True, stack)

    def _or(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        if not args:
            return _value(FALSE)
        return self._logic(args, 0, env, False, stack)

    def _quote(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        return _value(quote_parts(args))

    def _quasiquote(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        template = quasiquote_parts(args)
        holes = collect_holes(template)
        if not holes:
            return _value(fill_template(template, []))
        stack.append(Quasi(template, holes, env))
        return holes[0].expr, env

    def _apply(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        fn_expr, list_expr = apply_parts(args)
        stack.append(ApplyFunction(list_expr, env))
        return fn_expr, env

    def _eval(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        expr = eval_parts(args)
        stack.append(EvalInRoot(env.root()))
        return expr, env

    def _define_syntax_rule(self, args: list[SExpression], env: Environment, stack: Stack) -> State:
        macro = define_syntax_rule_parts(args)
        env.define(Symbol(macro.name), macro)
        return _value([])
