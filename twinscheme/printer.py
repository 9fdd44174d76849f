"""display/write rendering of values.

`display` prints data the way a user reads it: symbols and strings bare.
`write` prints data the way the reader reads it back: strings quoted and
escaped, and a top-level list or symbol marked as a quoted datum ('x, '(1 2)).
"""

from __future__ import annotations

from twinscheme import Value
from twinscheme.types.boolean import Boolean
from twinscheme.types.custom import CustomType
from twinscheme.types.literal import Literal, syntax
from twinscheme.types.macro import Macro
from twinscheme.types.procedure import Closure, Native
from twinscheme.types.symbol import Symbol

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def _quote_string(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def _render(value: Value, quote_strings: bool) -> str:
    if isinstance(value, Literal):
        return _render(value.value, quote_strings)
    if isinstance(value, Boolean):
        return repr(value)
    if isinstance(value, str):
        return _quote_string(value) if quote_strings else value
    if isinstance(value, list):
        return "(" + " ".join(_render(v, quote_strings) for v in value) + ")"
    if isinstance(value, (Native, Closure)):
        return "#<procedure>"
    if isinstance(value, Macro):
        return "#<macro>"
    if isinstance(value, (Symbol, CustomType, int)):
        return str(value)
    return repr(value)


def display(value: Value) -> str:
    return _render(value, quote_strings=False)


def write(value: Value) -> str:
    value = syntax(value)
    text = _render(value, quote_strings=True)
    if isinstance(value, (list, Symbol)):
        return "'" + text
    return text


def write_args(args: list[Value]) -> str:
    """Render an argument list for error messages, e.g. (x "a" 3)."""
    return _render(list(args), quote_strings=True)
