"""Argument validation shared by special forms, primitives and both evaluators.

Every message is built here so that the tree-walking and continuation-passing
evaluators raise byte-identical errors for the same program.
"""

from __future__ import annotations

from twinscheme import SExpression, Value
from twinscheme.errors import SchemeArityError, SchemeTypeError
from twinscheme.printer import write, write_args
from twinscheme.types.symbol import Symbol


def arity_error(name: str, expected: str, args: list[SExpression]) -> SchemeArityError:
    return SchemeArityError(f"Must supply {expected} to {name}: {write_args(args)}")


def type_error(name: str, args: list[Value]) -> SchemeTypeError:
    return SchemeTypeError(f"Bad argument types to {name}: {write_args(args)}")


def non_procedure_error(head: Value) -> SchemeTypeError:
    return SchemeTypeError(f"Non-procedure at head of expression: {write(head)}")


def check_count(name: str, args: list[SExpression], count: int, expected: str) -> None:
    if len(args) != count:
        raise arity_error(name, expected, args)


def check_params(name: str, params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a list of symbols."""
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SchemeTypeError(f"Parameters to {name} must be a list of symbols: {write(params)}")
    return list(params)


_COUNT_WORDS = {1: "one", 2: "two", 3: "three"}


def exactly(count: int) -> str:
    """Argument-count phrase for arity messages: 'exactly two arguments'."""
    if count == 0:
        return "no arguments"
    word = _COUNT_WORDS.get(count, str(count))
    return f"exactly {word} argument" + ("" if count == 1 else "s")
