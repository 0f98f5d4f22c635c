"""Tokenizer and classifier for arithmetic expression lines.

Architecture:
lexer/
├── __init__.py      # Re-exports classify, tokenize
├── grammar.py       # Compiled patterns and character classes
├── tokenizer.py     # Line -> raw token strings
└── classifier.py    # Raw token -> LexemeKind

Usage:
    >>> from arithlex.lexer import classify, tokenize
    >>> [classify(t).name for t in tokenize("x := 0x1F;")]
    ['IDENTIFIER', 'ASSIGNMENT', 'HEX_NUMBER', 'STATEMENT_END']

"""

from arithlex.lexer.classifier import classify, is_hex_literal
from arithlex.lexer.tokenizer import iter_tokens, tokenize

__all__ = ["classify", "is_hex_literal", "iter_tokens", "tokenize"]
