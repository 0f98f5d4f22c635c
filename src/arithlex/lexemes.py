"""Lexeme and LexemeKind definitions for arithlex.

The line processor produces a sequence of Lexeme objects. Each Lexeme
has a kind, the raw token text, and the 1-based line it came from.

Thread Safety:
Lexeme is frozen (immutable) and safe to share across threads.
LexemeKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LexemeKind(Enum):
    """Lexeme kinds produced by classification.

    UNKNOWN is a signal for the caller, never stored in a result.

    """

    ASSIGNMENT = auto()  # :=
    OPERATOR = auto()  # + - * /
    HEX_NUMBER = auto()  # 0x1F
    INTEGER_NUMBER = auto()  # 42
    IDENTIFIER = auto()  # total_1
    STATEMENT_END = auto()  # ;
    PARENTHESIS = auto()  # ( )
    UNKNOWN = auto()

    @property
    def label(self) -> str:
        """Display name, e.g. "Hex Number"."""
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class Lexeme:
    """A classified token with its source line.

    Attributes:
        kind: The lexeme kind (never LexemeKind.UNKNOWN)
        value: The raw token text
        lineno: Source line number (1-indexed)

    """

    kind: LexemeKind
    value: str
    lineno: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Lexeme({self.kind.name}, {self.value!r}, line {self.lineno})"

    def as_row(self) -> tuple[str, str, int]:
        """(Lexeme Type, Value, Line Number) row for tabular display."""
        return (self.kind.label, self.value, self.lineno)
