"""Continuation frames for the CPS machine.

A frame records what to do with the value of a pending sub-evaluation. The
machine keeps them on an explicit stack; the frame on top is the current
continuation and the empty stack means "return to the caller of run()".
The set is closed: the machine dispatches over exactly these classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from twinscheme import SExpression, Value
from twinscheme.evaluation.special_forms.quote_forms import Hole
from twinscheme.types.environment import Environment
from twinscheme.types.symbol import Symbol


@dataclass
class ApplyHead:
    """The head of an application is being evaluated; `args` are still unevaluated."""
    args: list[SExpression]
    env: Environment


@dataclass
class EvalArgs:
    """Evaluate argument expressions left to right, then apply `proc` to the values."""
    proc: Value
    exprs: list[SExpression]
    env: Environment
    values: list[Value] = field(default_factory=list)


@dataclass
class Sequence:
    """Evaluate exprs[index:] in order; the last one runs in tail position."""
    exprs: list[SExpression]
    index: int
    env: Environment


@dataclass
class Branch:
    """The condition of an if is being evaluated."""
    then: SExpression
    otherwise: Optional[SExpression]
    env: Environment


@dataclass
class Define:
    name: Symbol
    env: Environment


@dataclass
class Assign:
    name: Symbol
    env: Environment


@dataclass
class LetBindings:
    """Evaluate let value expressions, then run the body in the new scope."""
    names: list[Symbol]
    exprs: list[SExpression]
    body: list[SExpression]
    env: Environment
    values: list[Value] = field(default_factory=list)


@dataclass
class Logic:
    """and/or: exprs[index] is the next operand to evaluate."""
    exprs: list[SExpression]
    index: int
    env: Environment
    is_and: bool


@dataclass
class Quasi:
    """Quasiquote holes are evaluated in order, then the template is filled."""
    template: SExpression
    holes: list[Hole]
    env: Environment
    values: list[Value] = field(default_factory=list)


@dataclass
class ApplyFunction:
    """apply: the procedure operand is being evaluated."""
    list_expr: SExpression
    env: Environment


@dataclass
class ApplyArguments:
    """apply: the argument list operand is being evaluated."""
    proc: Value
    env: Environment


@dataclass
class EvalInRoot:
    """eval: the datum is being produced; it is then evaluated in `root`."""
    root: Environment


Frame = (
    ApplyHead | EvalArgs | Sequence | Branch | Define | Assign | LetBindings
    | Logic | Quasi | ApplyFunction | ApplyArguments | EvalInRoot
)
