# querylang

`querylang` reads boolean search queries and turns them into a tree of
constraints: the words a document must contain, combined with AND and OR,
and the constraints a document must not match.

## Query syntax

| Form              | Meaning                                      |
|-------------------|----------------------------------------------|
| `lust gluttony`   | both must match (AND)                        |
| `greed OR sloth`  | either may match (also written `|` or `||`)  |
| `NOT wrath`       | exclude what matches (also written `!`)      |
| `( ... )`         | grouping                                     |
| `"seven deadly"`  | a quoted run of words, all required (AND)    |

- Constraints next to each other are joined with AND; OR binds more loosely
  than AND, so `a b OR c` means `(a b) OR c`.
- `NOT` applies only to the single constraint that follows it: a word, a
  quoted phrase or a parenthesised group.
- A quoted phrase may hold only words.
- A query needs at least one constraint that is not excluded.
- Words end at whitespace or at any of `| ! ( ) "`.
- The operators `OR` and `NOT` are recognised by prefix and are
  case-sensitive: `ORANGE` reads as `OR` followed by the word `ANGE`, and
  `NOTE` as `NOT` followed by `E`. Lower-case `or` and `not` are plain words.

## Library use

```python
from querylang.compiler import compile_query

container = compile_query(
    "lust gluttony !wrath (greed || sloth) !(envy | jealousy)",
    stemmer=str.lower,
)
print(container.included)   # (And(...), Or(...))
print(container.excluded)   # (Word('wrath'), Or(...))
```

`compile_query(query, stemmer=None)` returns a `QueryContainer` with two
tuples, `included` and `excluded`. Each constraint is built from three
frozen dataclasses:

- `Word(term)`: a single term, already passed through the stemmer;
- `And(terms)`: all of `terms` must match;
- `Or(terms)`: any of `terms` may match.

A group with a single member is not wrapped, so `(greed)` compiles to
`Word("greed")`. The stemmer is any callable mapping a query word to the
form stored in an index; without one, words are kept as written.

`str()` of these objects gives a compact form: `(a b)` for AND, `(a | b)`
for OR, and for a container the included constraints followed by the
excluded ones, each prefixed with `!`.

Malformed queries raise `QuerySyntaxError`, a subclass of `ValueError`:
a missing closing parenthesis or quote, an empty group or quote, nothing
after `OR` or `NOT`, an unexpected token such as a stray `)`, or a query
with no included constraint.

`QueryParser(query, stemmer=None).compile()` does the same as
`compile_query`.

### Tokenizer

```python
from querylang.tokens import TokenStream, TokenType, tokenize

list(tokenize('"exact phrase" OR other'))
# [Token(QUOTE), Token(WORD, 'exact'), Token(WORD, 'phrase'),
#  Token(QUOTE), Token(OR), Token(WORD, 'other')]

stream = TokenStream("greed | sloth")
stream.match(TokenType.WORD)      # True
stream.current_token_string       # 'greed'
stream.read_token_type()          # TokenType.OR, not consumed
stream.take_token()               # Token(TokenType.OR)
```

`tokenize` yields tokens up to, but not including, the end of input. Only
word tokens carry a `value`; for the others it is the empty string.

## Command line

```
querylang 'lust gluttony !wrath (greed || sloth) !(envy | jealousy)'
```

prints one line per constraint:

```
include (lust gluttony)
include (greed | sloth)
exclude wrath
exclude (envy | jealousy)
```

The arguments are joined with spaces to form the query; with no arguments
the example query above is used. On a syntax error the message is written
to standard error and the exit status is 1. The command applies no
stemming.

## What it does not do

`querylang` only compiles queries. It has no index, stores no documents,
does not evaluate a constraint tree against anything, and ships no stemmer:
evaluation and stemming are for the caller to supply.

## Development

```
pip install -e .[test]
pytest
```