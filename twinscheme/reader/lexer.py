"""
  Scheme lexer

- Streaming: `lex` yields tokens lazily, `tokenize` collects them
- Every token carries its 1-based line and column for error reporting
- Token kinds:
    lparen rparen                  ( )
    quote quasiquote               ' `
    unquote unquote_splicing       , ,@
    boolean                        #t #f
    integer                        42 -7
    string                         "text" with \\" \\\\ \\n \\t escapes
    identifier                     anything else up to a delimiter (unicode allowed)
- ; starts a comment that runs to the end of the line
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from twinscheme.errors import SchemeSyntaxError
from twinscheme.types.integer import I64_MAX, I64_MIN


class Token(NamedTuple):
    kind: str
    value: object
    line: int
    column: int


DELIMITERS = frozenset("()'`,\";")

INTEGER_RE = re.compile(r"-?[0-9]+")

PUNCTUATION: dict[str, str] = {
    "(": "lparen",
    ")": "rparen",
    "'": "quote",
    "`": "quasiquote",
}

STRING_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}


def _is_delimiter(ch: str) -> bool:
    return ch.isspace() or ch in DELIMITERS


def lex(source: str) -> Iterator[Token]:
    """Token generator over `source`."""
    pos = 0
    n = len(source)
    line = 1
    line_start = 0

    def column(at: int) -> int:
        return at - line_start + 1

    def expect_delimiter(at: int) -> None:
        # Atoms must end at a delimiter or at end of input
        if at < n and not _is_delimiter(source[at]):
            raise SchemeSyntaxError(
                f"Unexpected character when looking for a delimiter: {source[at]}",
                line,
                column(at),
            )

    while pos < n:
        ch = source[pos]

        if ch == "\n":
            pos += 1
            line += 1
            line_start = pos
            continue
        if ch.isspace():
            pos += 1
            continue
        if ch == ";":
            while pos < n and source[pos] != "\n":
                pos += 1
            continue

        start_col = column(pos)

        if ch in PUNCTUATION:
            yield Token(PUNCTUATION[ch], ch, line, start_col)
            pos += 1
            continue

        if ch == ",":
            if pos + 1 < n and source[pos + 1] == "@":
                yield Token("unquote_splicing", ",@", line, start_col)
                pos += 2
            else:
                yield Token("unquote", ",", line, start_col)
                pos += 1
            continue

        if ch == '"':
            start_line = line
            pos += 1
            chars: list[str] = []
            while True:
                if pos >= n:
                    raise SchemeSyntaxError("Unterminated string literal", start_line, start_col)
                c = source[pos]
                if c == '"':
                    pos += 1
                    break
                if c == "\\":
                    if pos + 1 >= n:
                        raise SchemeSyntaxError("Unterminated string literal", start_line, start_col)
                    esc = source[pos + 1]
                    if esc not in STRING_ESCAPES:
                        raise SchemeSyntaxError(
                            f"Unknown escape sequence: \\{esc}", line, column(pos)
                        )
                    chars.append(STRING_ESCAPES[esc])
                    pos += 2
                    continue
                if c == "\n":
                    line += 1
                    line_start = pos + 1
                chars.append(c)
                pos += 1
            yield Token("string", "".join(chars), start_line, start_col)
            continue

        if ch == "#":
            flag = source[pos + 1] if pos + 1 < n else ""
            if flag not in ("t", "f"):
                raise SchemeSyntaxError(
                    f"Unexpected character after #: {flag or 'end of input'}", line, start_col
                )
            expect_delimiter(pos + 2)
            yield Token("boolean", flag == "t", line, start_col)
            pos += 2
            continue

        m = INTEGER_RE.match(source, pos)
        if m:
            expect_delimiter(m.end())
            value = int(m.group())
            if value < I64_MIN or value > I64_MAX:
                raise SchemeSyntaxError(f"Integer literal out of range: {m.group()}", line, start_col)
            yield Token("integer", value, line, start_col)
            pos = m.end()
            continue

        end = pos
        while end < n and not _is_delimiter(source[end]):
            end += 1
        yield Token("identifier", source[pos:end], line, start_col)
        pos = end


def tokenize(source: str) -> list[Token]:
    return list(lex(source))
