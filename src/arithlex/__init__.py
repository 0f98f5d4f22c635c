"""
arithlex — Lexical analyzer for arithmetic and assignment expressions

Classifies each line of input into typed lexemes (identifiers, numbers,
operators, assignment, parentheses, statement ends) and rejects malformed
lines with a line-scoped diagnostic. A bad line never stops the lines
after it from being analyzed.

Quick Start:
    >>> from arithlex import analyze
    >>> result = analyze(["x := 5 + 0x1F;", "(a + b"])
    >>> [(lx.kind.name, lx.value) for lx in result.lexemes]
    [('IDENTIFIER', 'x'), ('ASSIGNMENT', ':='), ('INTEGER_NUMBER', '5'), ('OPERATOR', '+'), ('HEX_NUMBER', '0x1F'), ('STATEMENT_END', ';')]
    >>> str(result.errors[0])
    'line 2: parenthesis count mismatch'

    >>> # Or use the configurable Analyzer
    >>> from arithlex import Analyzer, AnalyzeConfig
    >>> analyzer = Analyzer(AnalyzeConfig(max_workers=4))
    >>> result = analyzer.analyze_text("a := 1;\\nb := a * 2;")
"""

from collections.abc import Iterable

from arithlex.config import (
    AnalyzeConfig,
    analyze_config_context,
    get_analyze_config,
    reset_analyze_config,
    set_analyze_config,
)
from arithlex.errors import ArithlexError, EmptySourceError, ErrorKind, ValidationError
from arithlex.lexemes import Lexeme, LexemeKind
from arithlex.lexer import classify, tokenize
from arithlex.loader import load_lines, split_lines
from arithlex.processor import analyze_line, process
from arithlex.profiling import (
    AnalysisAccumulator,
    get_analysis_accumulator,
    profiled_analyze,
)
from arithlex.renderers.table import TableRenderer, format_error, render_table
from arithlex.results import AnalysisResult, LineError, LineResult
from arithlex.serialization import from_dict, from_json, to_dict, to_json
from arithlex.validation import validate_line, validate_tokens

__version__ = "0.1.0"


def analyze(lines: Iterable[str], *, source_file: str | None = None) -> AnalysisResult:
    """Analyze an ordered sequence of raw lines.

    Uses the active AnalyzeConfig (see arithlex.config).

    Args:
        lines: Raw text lines in source order
        source_file: Optional source file path for error messages

    Returns:
        AnalysisResult with the lexemes of every accepted line and one
        LineError per rejected line, both in input order. Blank lines
        contribute nothing.

    Example:
        >>> analyze(["5 := x"]).errors[0].kind
        <ErrorKind.MISSING_ASSIGNMENT_TARGET: 4>
    """
    lines = list(lines)
    result = process(lines, source_file=source_file)

    acc = get_analysis_accumulator()
    if acc is not None:
        acc.record_analysis(
            line_count=len(lines),
            lexeme_count=len(result.lexemes),
            error_count=len(result.errors),
        )
    return result


class Analyzer:
    """Reusable analyzer bound to one AnalyzeConfig.

    Usage:
        >>> analyzer = Analyzer()
        >>> analyzer(["x := 1;"]).ok
        True

    Thread Safety:
        Sets config via ContextVar for the duration of each call. Safe to use
        multiple Analyzer instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: AnalyzeConfig | None = None) -> None:
        self._config = config or AnalyzeConfig()

    @property
    def config(self) -> AnalyzeConfig:
        return self._config

    def __call__(
        self, lines: Iterable[str], *, source_file: str | None = None
    ) -> AnalysisResult:
        """Analyze lines with this analyzer's config."""
        with analyze_config_context(self._config):
            return analyze(lines, source_file=source_file)

    def analyze_text(self, source: str, *, source_file: str | None = None) -> AnalysisResult:
        """Analyze a block of text, one expression per line."""
        return self(split_lines(source), source_file=source_file)

    def analyze_file(self, path: str) -> AnalysisResult:
        """Load a file with load_lines() and analyze it.

        Raises:
            EmptySourceError: If the file has no lines.
            ArithlexError: If the file cannot be read.
        """
        return self(load_lines(path), source_file=str(path))

    def analyze_many(self, sources: Iterable[str]) -> list[AnalysisResult]:
        """Analyze several text blocks; line numbers restart for each."""
        with analyze_config_context(self._config):
            return [analyze(split_lines(source)) for source in sources]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "analyze",
    "analyze_line",
    "process",
    "Analyzer",
    # Pipeline stages
    "classify",
    "tokenize",
    "validate_line",
    "validate_tokens",
    # Data model
    "Lexeme",
    "LexemeKind",
    "LineError",
    "LineResult",
    "AnalysisResult",
    # Errors
    "ArithlexError",
    "EmptySourceError",
    "ErrorKind",
    "ValidationError",
    # Configuration (ContextVar-based)
    "AnalyzeConfig",
    "analyze_config_context",
    "get_analyze_config",
    "reset_analyze_config",
    "set_analyze_config",
    # Profiling
    "AnalysisAccumulator",
    "get_analysis_accumulator",
    "profiled_analyze",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Collaborators
    "load_lines",
    "split_lines",
    "TableRenderer",
    "format_error",
    "render_table",
]
