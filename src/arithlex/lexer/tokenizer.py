"""Regex-driven tokenizer.

Splits a line into raw token strings with the ordered alternation in
arithlex.lexer.grammar. Whitespace separates tokens and is discarded.
Characters no alternative matches are skipped; the line validator
rejects illegal characters before tokenization runs.
"""

from __future__ import annotations

from collections.abc import Iterator

from arithlex.lexer.grammar import TOKEN_PATTERN


def iter_tokens(line: str) -> Iterator[str]:
    """Yield tokens left to right."""
    for match in TOKEN_PATTERN.finditer(line):
        yield match.group()


def tokenize(line: str) -> list[str]:
    """Split a line into tokens.

    Args:
        line: A single line of source text

    Returns:
        Tokens in order of occurrence (empty for a blank line)

    Example:
        >>> tokenize("x := 5 + 0x1F;")
        ['x', ':=', '5', '+', '0x1F', ';']
    """
    return list(iter_tokens(line))
