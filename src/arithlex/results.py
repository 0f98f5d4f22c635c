"""Result types returned by the line processor.

A line either contributes lexemes or a LineError, never both.
All types are frozen dataclasses and safe to share across threads.
"""

from __future__ import annotations

from dataclasses import dataclass

from arithlex.errors import ErrorKind, ValidationError
from arithlex.lexemes import Lexeme


@dataclass(frozen=True, slots=True)
class LineError:
    """A line-scoped failure.

    Attributes:
        lineno: Line number of the rejected line (1-indexed)
        message: Human-readable cause
        kind: Category of the failure
        source_file: Source file path (optional, for messages)

    """

    lineno: int
    message: str
    kind: ErrorKind
    source_file: str | None = None

    def __str__(self) -> str:
        """Format for display, e.g. "calc.txt:3: illegal character '#'"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}: {self.message}"
        return f"line {self.lineno}: {self.message}"

    @classmethod
    def from_exception(
        cls, exc: ValidationError, lineno: int, source_file: str | None = None
    ) -> LineError:
        """Build a LineError from a validator exception."""
        return cls(
            lineno=lineno,
            message=exc.message,
            kind=exc.kind,
            source_file=source_file if source_file is not None else exc.source_file,
        )


@dataclass(frozen=True, slots=True)
class LineResult:
    """Outcome of analyzing one line."""

    lineno: int
    lexemes: tuple[Lexeme, ...] = ()
    error: LineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Lexemes and line errors for an ordered sequence of lines.

    Attributes:
        lexemes: Lexemes of all accepted lines, in input order
        errors: One LineError per rejected line, in input order

    """

    lexemes: tuple[Lexeme, ...] = ()
    errors: tuple[LineError, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no line was rejected."""
        return not self.errors

    def lexemes_for_line(self, lineno: int) -> tuple[Lexeme, ...]:
        """Lexemes contributed by a single line."""
        return tuple(lx for lx in self.lexemes if lx.lineno == lineno)

    def error_for_line(self, lineno: int) -> LineError | None:
        """The LineError for a line, or None if it was accepted or skipped."""
        for err in self.errors:
            if err.lineno == lineno:
                return err
        return None

    @classmethod
    def from_lines(cls, results: list[LineResult]) -> AnalysisResult:
        """Merge per-line outcomes, preserving their order."""
        lexemes: list[Lexeme] = []
        errors: list[LineError] = []
        for line in results:
            if line.error is not None:
                errors.append(line.error)
            else:
                lexemes.extend(line.lexemes)
        return cls(lexemes=tuple(lexemes), errors=tuple(errors))
