# Core type aliases for twinscheme's data model.
# Values are plain Python objects where Python already has the right shape
# (int, str, list) plus small classes for the rest (Symbol, Boolean,
# Native, Closure, Macro, CustomType). Code and data share one representation.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms (code-as-data).
# - Value:       use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Forms alias (used interchangeably with Value)
SExpression = Value

# Evaluator entry point handed to special natives: evaluate(expr, env) -> Value
EvaluatorFn = Callable[..., Value]

# Host-provided special native: fn(args, env, evaluate) -> Value
NativeFn = Callable[..., Value]
