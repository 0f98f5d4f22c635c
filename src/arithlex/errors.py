"""Exception classes for arithlex.

Provides the error taxonomy for line validation and the base exception
for everything else the package raises.

Validators raise ValidationError; the line processor converts it into a
LineError value so no exception crosses a line boundary.
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Why a line was rejected.

    Organized by the stage that detects it:
    - Line validator (whole-line checks, in evaluation order)
    - Token validator
    - Classification

    """

    # Line validator
    UNBALANCED_PARENTHESES = auto()
    ILLEGAL_CHARACTER = auto()
    MULTIPLE_ASSIGNMENTS = auto()
    MISSING_ASSIGNMENT_TARGET = auto()
    MALFORMED_HEX = auto()
    MISSING_OPERAND = auto()
    TRAILING_OPERATOR = auto()

    # Token validator
    INVALID_ASSIGNMENT_CONTEXT = auto()
    INVALID_OPERATOR = auto()

    # Classification
    UNKNOWN_SYMBOL = auto()

    @property
    def description(self) -> str:
        """Default human-readable cause for this kind."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.UNBALANCED_PARENTHESES: "parenthesis count mismatch",
    ErrorKind.ILLEGAL_CHARACTER: "illegal character",
    ErrorKind.MULTIPLE_ASSIGNMENTS: "multiple assignment operators",
    ErrorKind.MISSING_ASSIGNMENT_TARGET: "assignment missing identifier target",
    ErrorKind.MALFORMED_HEX: "malformed hexadecimal literal",
    ErrorKind.MISSING_OPERAND: "missing operand after operator",
    ErrorKind.TRAILING_OPERATOR: "expression cannot end with an operator",
    ErrorKind.INVALID_ASSIGNMENT_CONTEXT: "assignment missing identifier target",
    ErrorKind.INVALID_OPERATOR: "invalid operator",
    ErrorKind.UNKNOWN_SYMBOL: "unknown symbol",
}


class ArithlexError(Exception):
    """Base exception for all arithlex errors.

    Subclass this for specific error categories.
    """

    pass


class ValidationError(ArithlexError):
    """A line failed structural or token validation.

    Raised by the line validator, the token validator and classification.
    Always scoped to a single line.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize validation error.

        Args:
            kind: Category of the failure
            message: Error description (defaults to the kind's description)
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.kind = kind
        self.message = message or kind.description
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{self.message}")


class EmptySourceError(ArithlexError):
    """A source file contained no lines at all."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File is empty: {path}")
