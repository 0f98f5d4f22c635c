"""Token sequence validation.

Catches problems only visible after tokenization, such as an
assignment whose left neighbour did not come out of the tokenizer as
an identifier.
"""

from __future__ import annotations

from collections.abc import Sequence

from arithlex.errors import ErrorKind, ValidationError
from arithlex.lexemes import LexemeKind
from arithlex.lexer.classifier import classify
from arithlex.lexer.grammar import ASSIGNMENT


def validate_tokens(tokens: Sequence[str], lineno: int | None = None) -> None:
    """Validate a line's token sequence.

    Args:
        tokens: Raw tokens in order of occurrence
        lineno: Line number for the error (optional)

    Raises:
        ValidationError: INVALID_ASSIGNMENT_CONTEXT when ":=" is first or
            follows a non-identifier, INVALID_OPERATOR for any other token
            starting with ":".
    """
    for i, token in enumerate(tokens):
        if token == ASSIGNMENT:
            if i == 0 or classify(tokens[i - 1]) is not LexemeKind.IDENTIFIER:
                raise ValidationError(ErrorKind.INVALID_ASSIGNMENT_CONTEXT, lineno=lineno)
        elif token.startswith(":"):
            raise ValidationError(
                ErrorKind.INVALID_OPERATOR,
                f"invalid operator {token!r}",
                lineno=lineno,
            )
