from __future__ import annotations


class Literal:
    """An already-evaluated value standing in an argument position.

    `apply` hands these to special natives. Evaluating one yields `value`
    unchanged, and the syntax positions of the built-in forms (define and
    set! names, parameter lists, let bindings, quoted data) unwrap it. Unlike
    a (quote v) form it can't be read as syntax or redirected by rebinding
    `quote`.
    """

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Literal) and self.value == other.value

    def __repr__(self):
        return f"Literal({self.value!r})"


def syntax(form):
    """The form a special form should inspect as syntax."""
    return form.value if isinstance(form, Literal) else form
