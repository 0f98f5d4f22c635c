"""Whole-line structural validation.

Runs before tokenization to reject grossly malformed lines cheaply.
Checks run in a fixed order and the first failure wins, so the
reported cause for a given line is deterministic.
"""

from __future__ import annotations

from arithlex.errors import ErrorKind, ValidationError
from arithlex.lexer.grammar import (
    ASSIGNMENT,
    ASSIGNMENT_TARGET_PATTERN,
    ILLEGAL_CHAR_PATTERN,
    MALFORMED_HEX_PATTERN,
    MISSING_OPERAND_PATTERN,
    TRAILING_OPERATOR_PATTERN,
)


def validate_line(line: str, lineno: int | None = None) -> None:
    """Validate a trimmed line.

    Checks, in order:
    1. "(" and ")" counts match
    2. only ASCII letters, digits, whitespace and +-*/();:= occur
    3. at most one ":="
    4. ":=" follows an identifier at line start or after whitespace
    5. every "0x" is followed by a hex digit
    6. no operator or "(" directly before ";" or end of line
    7. the line does not end with an operator

    Args:
        line: Line text, already stripped of surrounding whitespace
        lineno: Line number for the error (optional)

    Raises:
        ValidationError: On the first failing check.
    """
    if line.count("(") != line.count(")"):
        raise ValidationError(ErrorKind.UNBALANCED_PARENTHESES, lineno=lineno)

    illegal = ILLEGAL_CHAR_PATTERN.search(line)
    if illegal:
        raise ValidationError(
            ErrorKind.ILLEGAL_CHARACTER,
            f"illegal character {illegal.group()!r}",
            lineno=lineno,
        )

    assignments = line.count(ASSIGNMENT)
    if assignments > 1:
        raise ValidationError(ErrorKind.MULTIPLE_ASSIGNMENTS, lineno=lineno)

    if assignments == 1 and not ASSIGNMENT_TARGET_PATTERN.search(line):
        raise ValidationError(ErrorKind.MISSING_ASSIGNMENT_TARGET, lineno=lineno)

    if MALFORMED_HEX_PATTERN.search(line):
        raise ValidationError(ErrorKind.MALFORMED_HEX, lineno=lineno)

    if MISSING_OPERAND_PATTERN.search(line):
        raise ValidationError(ErrorKind.MISSING_OPERAND, lineno=lineno)

    # Shadowed by the operand check for operators at end of line
    if TRAILING_OPERATOR_PATTERN.match(line):
        raise ValidationError(ErrorKind.TRAILING_OPERATOR, lineno=lineno)
