from __future__ import annotations
from typing import Protocol

from twinscheme import SExpression, Value
from twinscheme.types.environment import Environment


class Backend(Protocol):
    name: str

    def eval(self, expr: SExpression, env: Environment) -> Value: ...
