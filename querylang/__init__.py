"""Tokenizer and compiler for a small boolean search-query language."""

__version__ = "0.1.0"
__all__ = ["compiler", "tokens"]