"""Non-hygienic substitution macros (define-syntax-rule)."""

from __future__ import annotations

from twinscheme import SExpression
from twinscheme.types.symbol import Symbol


def _substitute(expr: SExpression, bindings: dict[Symbol, SExpression]) -> SExpression:
    """Replace parameter symbols by their argument forms, descending into lists.

    Quoted data is not special: a parameter name inside (quote ...) is
    substituted too.
    """
    if isinstance(expr, Symbol):
        return bindings.get(expr, expr)
    if isinstance(expr, list):
        return [_substitute(x, bindings) for x in expr]
    return expr


class Macro:
    """Parameter names plus a body template, expanded by substitution.

    Expansion is purely syntactic and not hygienic: a parameter name that
    collides with a use-site variable captures it.
    """

    __slots__ = ("name", "params", "body")

    def __init__(self, name: str, params: list[Symbol], body: list[SExpression]):
        self.name = name
        self.params = params
        self.body = body

    def expand(self, args: list[SExpression]) -> list[SExpression]:
        """Return the substituted body forms, to be evaluated at the use site.

        Callers check the argument count first (evaluation.apply.expand_macro).
        """
        bindings = dict(zip(self.params, args))
        return [_substitute(form, bindings) for form in self.body]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Macro) and self.params == other.params and self.body == other.body

    def __hash__(self) -> int:
        return hash(tuple(self.params))

    def __str__(self) -> str:
        return "#<macro>"

    def __repr__(self) -> str:
        return f"<macro {self.name}>"
