"""Token classifier.

Maps a single raw token to a LexemeKind. Pure and total: any string
gets a kind, with LexemeKind.UNKNOWN as the fallback.
"""

from __future__ import annotations

from arithlex.lexemes import LexemeKind
from arithlex.lexer.grammar import (
    ASSIGNMENT,
    HEX_DIGITS,
    HEX_PREFIX,
    IDENTIFIER_PATTERN,
    INTEGER_PATTERN,
    OPERATOR_CHARS,
    PARENTHESIS_CHARS,
    STATEMENT_END,
)


def is_hex_literal(token: str) -> bool:
    """Check for 0x followed by one or more hex digits.

    The prefix is case-sensitive: "0X1F" is not a hex literal.
    """
    if not token.startswith(HEX_PREFIX):
        return False
    digits = token[len(HEX_PREFIX) :]
    return bool(digits) and all(c in HEX_DIGITS for c in digits)


def classify(token: str) -> LexemeKind:
    """Classify a raw token.

    Rules are tried in order; the first match wins. Hex literals are
    checked before identifiers and integers so "0x1F" is never split
    into "0" and "x1F".

    Integers are ASCII digits only. A sign, an underscore separator or
    surrounding whitespace is not accepted, so "-5" and "+5" are UNKNOWN;
    the tokenizer never yields a signed number, it splits "-5" into "-"
    and "5".

    Args:
        token: Raw token text

    Returns:
        The LexemeKind, LexemeKind.UNKNOWN if nothing matches.

    Example:
        >>> classify("0x1F")
        <LexemeKind.HEX_NUMBER: 3>
        >>> classify("#")
        <LexemeKind.UNKNOWN: 8>
    """
    if token == ASSIGNMENT:
        return LexemeKind.ASSIGNMENT
    if len(token) == 1 and token in OPERATOR_CHARS:
        return LexemeKind.OPERATOR
    if is_hex_literal(token):
        return LexemeKind.HEX_NUMBER
    if INTEGER_PATTERN.fullmatch(token):
        return LexemeKind.INTEGER_NUMBER
    if IDENTIFIER_PATTERN.fullmatch(token):
        return LexemeKind.IDENTIFIER
    if token == STATEMENT_END:
        return LexemeKind.STATEMENT_END
    if len(token) == 1 and token in PARENTHESIS_CHARS:
        return LexemeKind.PARENTHESIS
    return LexemeKind.UNKNOWN
