from __future__ import annotations


class Boolean:
    """Scheme boolean. Kept distinct from Python's bool so that #t never equals 1."""

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self):
        return "#t" if self.value else "#f"

    def __eq__(self, other):
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self):
        return hash((Boolean, self.value))


TRUE = Boolean(True)
FALSE = Boolean(False)


def to_boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def is_truthy(value) -> bool:
    # Only #f is false; 0, "" and '() are all true.
    return not (isinstance(value, Boolean) and not value.value)
