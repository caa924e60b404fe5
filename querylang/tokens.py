"""Tokens of the query language and a stream that hands them out one by one."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\v\f\r")
_RESERVED = frozenset('|!()"') | _WHITESPACE

_SINGLE_CHAR_TYPES = {
    "|": "OR",
    "!": "NOT",
    "(": "OPEN_PAREN",
    ")": "CLOSE_PAREN",
    '"': "QUOTE",
}


class TokenType(enum.Enum):
    """Kinds of token the query language knows."""

    INVALID = -1
    EOF = 0
    OR = 1
    NOT = 2
    OPEN_PAREN = 3
    CLOSE_PAREN = 4
    QUOTE = 5
    WORD = 6


@dataclass(frozen=True)
class Token:
    """A token; only words carry a value."""

    type: TokenType
    value: str = ""


class TokenStream:
    """Reads tokens from a query string, left to right."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.current_token: Token | None = None
        self.current_token_string = ""

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _startswith(self, prefix: str) -> bool:
        return self._text.startswith(prefix, self._pos)

    def read_token_type(self) -> TokenType:
        """Return the type of the next token without consuming it."""
        self._skip_whitespace()
        if self._pos >= len(self._text):
            return TokenType.EOF
        if self._startswith("OR"):
            return TokenType.OR
        if self._startswith("NOT"):
            return TokenType.NOT
        name = _SINGLE_CHAR_TYPES.get(self._text[self._pos])
        return TokenType[name] if name else TokenType.WORD

    def take_token(self) -> Token:
        """Consume and return the next token."""
        token_type = self.read_token_type()
        if token_type is TokenType.EOF:
            return Token(TokenType.EOF)
        if token_type is TokenType.OR:
            self._pos += 2 if self._startswith("OR") or self._startswith("||") else 1
            return Token(TokenType.OR)
        if token_type is TokenType.NOT:
            self._pos += 3 if self._startswith("NOT") else 1
            return Token(TokenType.NOT)
        if token_type is not TokenType.WORD:
            self._pos += 1
            return Token(token_type)

        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] not in _RESERVED:
            self._pos += 1
        token = Token(TokenType.WORD, self._text[start:self._pos])
        self.current_token = token
        self.current_token_string = token.value
        return token

    def match(self, token_type: TokenType) -> bool:
        """Consume the next token if it is of the given type."""
        if self.read_token_type() is not token_type:
            return False
        token = self.take_token()
        self.current_token = token
        self.current_token_string = token.value
        return True


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of ``text`` up to, not including, the end."""
    stream = TokenStream(text)
    while True:
        token = stream.take_token()
        if token.type is TokenType.EOF:
            return
        yield token