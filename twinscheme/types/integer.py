"""Fixed-width integer helpers.

Integers are plain Python ints, but every arithmetic result is checked
against the signed 64-bit range so programs observe the same overflow
boundary on either evaluator.
"""

from __future__ import annotations

from twinscheme.errors import SchemeRuntimeError

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def is_integer(value) -> bool:
    # bool is an int subclass and must never pass as a Scheme integer
    return isinstance(value, int) and not isinstance(value, bool)


def check_range(value: int, op: str) -> int:
    if value < I64_MIN or value > I64_MAX:
        raise SchemeRuntimeError(f"Integer overflow in {op}")
    return value
