"""Built-in procedures for the twinscheme root environment.

Primitives receive already-evaluated argument values (`fn(values)`); both
evaluators evaluate the arguments left to right before calling them. The
special forms from evaluation.special_forms are registered alongside them
as natives that receive unevaluated arguments.
"""
from __future__ import annotations

from twinscheme import Value
from twinscheme.errors import SchemeRuntimeError
from twinscheme.evaluation.checks import arity_error, type_error
from twinscheme.evaluation.special_forms import SPECIAL_FORMS
from twinscheme.printer import display, write
from twinscheme.types.boolean import is_truthy, to_boolean
from twinscheme.types.environment import Environment
from twinscheme.types.integer import check_range, is_integer
from twinscheme.types.procedure import Native
from twinscheme.types.symbol import Symbol


def _integers(name: str, args: list[Value]) -> list[int]:
    if not all(is_integer(a) for a in args):
        raise type_error(name, args)
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Value]) -> Value:
    """Sum of all arguments; (+) is 0."""
    return check_range(sum(_integers("+", args)), "+")


def sub(args: list[Value]) -> Value:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    if not args:
        raise arity_error("-", "at least one argument", args)
    nums = _integers("-", args)
    if len(nums) == 1:
        return check_range(-nums[0], "-")
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return check_range(result, "-")


def mul(args: list[Value]) -> Value:
    """Product of all arguments; (*) is 1."""
    result = 1
    for x in _integers("*", args):
        result *= x
    return check_range(result, "*")


def div(args: list[Value]) -> Value:
    """Integer division left to right, truncating toward zero."""
    if len(args) < 2:
        raise arity_error("/", "at least two arguments", args)
    nums = _integers("/", args)
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise SchemeRuntimeError("Division by zero")
        q = abs(result) // abs(x)
        result = q if (result >= 0) == (x >= 0) else -q
    return check_range(result, "/")


def _chain(name: str, args: list[Value], holds) -> Value:
    if not args:
        raise arity_error(name, "at least one argument", args)
    nums = _integers(name, args)
    return to_boolean(all(holds(a, b) for a, b in zip(nums, nums[1:])))


def num_eq(args: list[Value]) -> Value:
    return _chain("=", args, lambda a, b: a == b)


def lt(args: list[Value]) -> Value:
    return _chain("<", args, lambda a, b: a < b)


def gt(args: list[Value]) -> Value:
    return _chain(">", args, lambda a, b: a > b)


def lte(args: list[Value]) -> Value:
    return _chain("<=", args, lambda a, b: a <= b)


def gte(args: list[Value]) -> Value:
    return _chain(">=", args, lambda a, b: a >= b)


def logical_not(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("not", "exactly one argument", args)
    return to_boolean(not is_truthy(args[0]))


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[Value]) -> Value:
    return list(args)


def cons(args: list[Value]) -> Value:
    """(cons x lst) -> new list with x prepended; lst is not modified."""
    if len(args) != 2:
        raise arity_error("cons", "exactly two arguments", args)
    head, tail = args
    if not isinstance(tail, list):
        raise type_error("cons", args)
    return [head] + tail


def _non_empty_list(name: str, args: list[Value]) -> list[Value]:
    if len(args) != 1:
        raise arity_error(name, "exactly one argument", args)
    xs = args[0]
    if not isinstance(xs, list) or not xs:
        raise type_error(name, args)
    return xs


def car(args: list[Value]) -> Value:
    return _non_empty_list("car", args)[0]


def cdr(args: list[Value]) -> Value:
    return _non_empty_list("cdr", args)[1:]


def null(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("null?", "exactly one argument", args)
    return to_boolean(args[0] == [])


def is_list(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("list?", "exactly one argument", args)
    return to_boolean(isinstance(args[0], list))


def length(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("length", "exactly one argument", args)
    if not isinstance(args[0], list):
        raise type_error("length", args)
    return len(args[0])


def append(args: list[Value]) -> Value:
    """Concatenate lists into a new list."""
    result: list[Value] = []
    for item in args:
        if not isinstance(item, list):
            raise type_error("append", args)
        result.extend(item)
    return result


# -------------------------------
# Errors and I/O
# -------------------------------
def error(args: list[Value]) -> Value:
    """(error x) aborts the current execution; the message is x in write form."""
    if len(args) != 1:
        raise arity_error("error", "exactly one argument", args)
    raise SchemeRuntimeError(write(args[0]))


def display_builtin(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("display", "exactly one argument", args)
    print(display(args[0]), end="")
    return []


def displayln(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("displayln", "exactly one argument", args)
    print(display(args[0]))
    return []


def write_builtin(args: list[Value]) -> Value:
    if len(args) != 1:
        raise arity_error("write", "exactly one argument", args)
    print(write(args[0]), end="")
    return []


def newline(args: list[Value]) -> Value:
    if args:
        raise arity_error("newline", "no arguments", args)
    print()
    return []


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "not": logical_not,
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "null?": null,
    "list?": is_list,
    "length": length,
    "append": append,
    "error": error,
    "display": display_builtin,
    "displayln": displayln,
    "write": write_builtin,
    "newline": newline,
}


def register(env: Environment) -> None:
    """Register every special form and primitive into the given environment."""
    env.update({Symbol(name): Native(name, fn) for name, fn in SPECIAL_FORMS.items()})
    env.update(
        {Symbol(name): Native(name, fn, evaluates_args=True) for name, fn in PRIMITIVES.items()}
    )
