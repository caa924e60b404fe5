"""Compiles a query string into a tree of word, AND and OR constraints."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from querylang.tokens import TokenStream, TokenType

DEFAULT_QUERY = "lust gluttony !wrath (greed || sloth) !(envy | jealousy)"


class QuerySyntaxError(ValueError):
    """Raised when a query cannot be compiled."""


@dataclass(frozen=True)
class Word:
    """Matches documents holding a single (stemmed) term."""

    term: str

    def __str__(self) -> str:
        return self.term


@dataclass(frozen=True)
class And:
    """Matches documents that satisfy every one of its terms."""

    terms: tuple[Constraint, ...]

    def __str__(self) -> str:
        return "(" + " ".join(str(t) for t in self.terms) + ")"


@dataclass(frozen=True)
class Or:
    """Matches documents that satisfy any one of its terms."""

    terms: tuple[Constraint, ...]

    def __str__(self) -> str:
        return "(" + " | ".join(str(t) for t in self.terms) + ")"


Constraint = Union[Word, And, Or]


@dataclass(frozen=True)
class QueryContainer:
    """Constraints a document must meet and constraints it must not."""

    included: tuple[Constraint, ...]
    excluded: tuple[Constraint, ...] = ()

    def __str__(self) -> str:
        parts = [str(c) for c in self.included]
        parts.extend(f"!{c}" for c in self.excluded)
        return " ".join(parts)


class QueryParser:
    """Recursive-descent parser for the query language.

    Grammar::

        query  ::= { "!" base | or }
        or     ::= and { OR and }
        and    ::= base { base }
        base   ::= word | "(" or ")" | '"' word { word } '"'
    """

    def __init__(self, query: str, stemmer: Callable[[str], str] | None = None) -> None:
        self._tokens = TokenStream(query)
        self._stem = stemmer if stemmer is not None else (lambda word: word)

    def _word(self) -> Word:
        return Word(self._stem(self._tokens.current_token_string))

    def _is_base_term(self) -> bool:
        return self._tokens.read_token_type() in (
            TokenType.WORD,
            TokenType.OPEN_PAREN,
            TokenType.QUOTE,
        )

    def _or(self) -> Constraint | None:
        first = self._and()
        if first is None:
            return None
        terms = [first]
        while self._tokens.match(TokenType.OR):
            term = self._and()
            if term is None:
                raise QuerySyntaxError("Expected constraint after OR")
            terms.append(term)
        return terms[0] if len(terms) == 1 else Or(tuple(terms))

    def _and(self) -> Constraint | None:
        first = self._base()
        if first is None:
            return None
        terms = [first]
        while self._is_base_term():
            term = self._base()
            if term is None:
                break
            terms.append(term)
        return terms[0] if len(terms) == 1 else And(tuple(terms))

    def _base(self) -> Constraint | None:
        if self._tokens.match(TokenType.WORD):
            return self._word()
        next_type = self._tokens.read_token_type()
        if next_type is TokenType.OPEN_PAREN:
            return self._paren()
        if next_type is TokenType.QUOTE:
            return self._quote()
        return None

    def _paren(self) -> Constraint | None:
        if not self._tokens.match(TokenType.OPEN_PAREN):
            return None
        constraint = self._or()
        if constraint is None:
            raise QuerySyntaxError("Expected constraint after open parenthesis")
        if not self._tokens.match(TokenType.CLOSE_PAREN):
            raise QuerySyntaxError("Expected close parenthesis after constraint")
        return constraint

    def _quote(self) -> Constraint | None:
        if not self._tokens.match(TokenType.QUOTE):
            return None
        constraint = self._phrase()
        if constraint is None:
            raise QuerySyntaxError("Expected constraint after quote")
        if not self._tokens.match(TokenType.QUOTE):
            raise QuerySyntaxError("Expected close quote after constraint")
        return constraint

    def _phrase(self) -> Constraint | None:
        terms = []
        while self._tokens.match(TokenType.WORD):
            terms.append(self._word())
        if not terms:
            return None
        return terms[0] if len(terms) == 1 else And(tuple(terms))

    def compile(self) -> QueryContainer:
        """Compile the whole query; raise QuerySyntaxError if it is malformed."""
        included: list[Constraint] = []
        excluded: list[Constraint] = []
        while self._tokens.read_token_type() is not TokenType.EOF:
            if self._tokens.match(TokenType.NOT):
                term = self._base()
                if term is None:
                    raise QuerySyntaxError("Expected constraint after NOT")
                excluded.append(term)
            else:
                term = self._or()
                if term is None:
                    raise QuerySyntaxError(
                        f"Unexpected {self._tokens.read_token_type().name} token"
                    )
                included.append(term)
        if not included:
            raise QuerySyntaxError("No included constraints")
        return QueryContainer(tuple(included), tuple(excluded))


def compile_query(
    query: str, stemmer: Callable[[str], str] | None = None
) -> QueryContainer:
    """Compile ``query``, stemming each word with ``stemmer`` if given."""
    return QueryParser(query, stemmer).compile()


def main(argv: list[str] | None = None) -> int:
    """Compile the query given on the command line and print its structure."""
    args = sys.argv[1:] if argv is None else argv
    query = " ".join(args) if args else DEFAULT_QUERY
    try:
        container = compile_query(query)
    except QuerySyntaxError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for constraint in container.included:
        print(f"include {constraint}")
    for constraint in container.excluded:
        print(f"exclude {constraint}")
    return 0


if __name__ == "__main__":
    sys.exit(main())