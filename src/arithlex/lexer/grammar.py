"""Lexical grammar and character classes.

All patterns are ASCII-only: letters outside A-Z/a-z are illegal
characters, not identifier characters.
"""

from __future__ import annotations

import re

ASSIGNMENT = ":="
HEX_PREFIX = "0x"
STATEMENT_END = ";"

OPERATOR_CHARS = frozenset("+-*/")
PARENTHESIS_CHARS = frozenset("()")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Ordered alternation: first alternative that matches at a position wins
TOKEN_PATTERN = re.compile(
    r"""
    :=                      # assignment
    | 0x[0-9A-Fa-f]+        # hexadecimal literal
    | [A-Za-z_][A-Za-z0-9_]*  # identifier
    | [0-9]+                # decimal literal
    | [-+*/();]             # operator or punctuation
    """,
    re.VERBOSE,
)

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
INTEGER_PATTERN = re.compile(r"[0-9]+")

# Line validator patterns
ILLEGAL_CHAR_PATTERN = re.compile(r"[^A-Za-z0-9\s+\-*/();:=]", re.ASCII)
ASSIGNMENT_TARGET_PATTERN = re.compile(r"(?:^|\s)[A-Za-z_][A-Za-z0-9_]*\s*:=", re.ASCII)
MALFORMED_HEX_PATTERN = re.compile(r"0x(?![0-9A-Fa-f])")
MISSING_OPERAND_PATTERN = re.compile(r"[-+*/(]\s*(?:;|\Z)", re.ASCII)
TRAILING_OPERATOR_PATTERN = re.compile(r".+[-+*/]\Z", re.DOTALL)
