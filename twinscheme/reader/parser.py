"""
  Scheme parser

Turns a token sequence into values directly (no intermediate node tree):

    identifier -> Symbol
    integer    -> int
    boolean    -> TRUE / FALSE
    string     -> str
    ( ... )    -> list
    'x `x ,x ,@x -> (quote x) (quasiquote x) (unquote x) (unquote-splicing x)
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from twinscheme import SExpression
from twinscheme.errors import SchemeSyntaxError
from twinscheme.reader.lexer import Token, tokenize
from twinscheme.types.boolean import to_boolean
from twinscheme.types.symbol import Symbol

QUOTE_FORMS: dict[str, Symbol] = {
    "quote": Symbol("quote"),
    "quasiquote": Symbol("quasiquote"),
    "unquote": Symbol("unquote"),
    "unquote_splicing": Symbol("unquote-splicing"),
}


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _end_position(self) -> tuple[int, int]:
        if not self.tokens:
            return 1, 1
        last = self.tokens[-1]
        return last.line, last.column

    def parse_expr(self) -> SExpression:
        tok = self.peek()
        if tok is None:
            line, col = self._end_position()
            raise SchemeSyntaxError("Unexpected end of input", line, col)
        self.advance()

        if tok.kind == "identifier":
            return Symbol(tok.value)
        if tok.kind in ("integer", "string"):
            return tok.value
        if tok.kind == "boolean":
            return to_boolean(tok.value)

        if tok.kind in QUOTE_FORMS:
            if self.peek() is None:
                raise SchemeSyntaxError(f"Expected a datum after {tok.value}", tok.line, tok.column)
            return [QUOTE_FORMS[tok.kind], self.parse_expr()]

        if tok.kind == "lparen":
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise SchemeSyntaxError("Unclosed list", tok.line, tok.column)
                if nxt.kind == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok.kind == "rparen":
            raise SchemeSyntaxError("Unexpected close paren", tok.line, tok.column)

        raise SchemeSyntaxError(f"Unknown token: {tok.kind} {tok.value}", tok.line, tok.column)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> list[SExpression]:
    return list(TokenStream(tokens).parse_all())


def read(source: str) -> list[SExpression]:
    """Tokenize and parse `source` into a list of top-level forms."""
    return parse(tokenize(source))
