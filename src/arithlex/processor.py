"""Line processor: validate, tokenize, re-validate and classify each line.

Every line is handled independently. A ValidationError raised while
analyzing a line is converted into a LineError for that line and never
propagates, so one bad line cannot stop the lines after it.

Thread Safety:
analyze_line() is a pure function of its arguments. process() shares no
mutable state between lines, so lines may be analyzed on worker threads;
results are merged back in input order.

"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from arithlex.config import AnalyzeConfig, get_analyze_config
from arithlex.errors import ErrorKind, ValidationError
from arithlex.lexemes import Lexeme, LexemeKind
from arithlex.lexer.classifier import classify
from arithlex.lexer.tokenizer import tokenize
from arithlex.results import AnalysisResult, LineError, LineResult
from arithlex.utils.logger import get_logger
from arithlex.validation.line import validate_line
from arithlex.validation.tokens import validate_tokens

logger = get_logger(__name__)


def _lex_line(line: str, lineno: int) -> tuple[Lexeme, ...]:
    """Run the full pipeline on a trimmed, non-empty line.

    Raises:
        ValidationError: If any stage rejects the line.
    """
    validate_line(line, lineno)
    tokens = tokenize(line)
    validate_tokens(tokens, lineno)

    lexemes: list[Lexeme] = []
    for token in tokens:
        kind = classify(token)
        if kind is LexemeKind.UNKNOWN:
            # Whole line is rejected; lexemes built so far are dropped
            raise ValidationError(
                ErrorKind.UNKNOWN_SYMBOL, f"unknown symbol: {token}", lineno=lineno
            )
        lexemes.append(Lexeme(kind=kind, value=token, lineno=lineno))
    return tuple(lexemes)


def analyze_line(line: str, lineno: int, *, source_file: str | None = None) -> LineResult:
    """Analyze a single raw line.

    Args:
        line: Raw line text (surrounding whitespace is ignored)
        lineno: 1-based position of the line in its source
        source_file: Optional source file path for error messages

    Returns:
        LineResult with either the line's lexemes or its LineError. Blank
        lines give an empty LineResult with no error.
    """
    text = line.strip()
    if not text:
        return LineResult(lineno=lineno)

    try:
        lexemes = _lex_line(text, lineno)
    except ValidationError as exc:
        logger.debug("line %d rejected: %s", lineno, exc.message)
        return LineResult(
            lineno=lineno,
            error=LineError.from_exception(exc, lineno, source_file),
        )
    return LineResult(lineno=lineno, lexemes=lexemes)


def process(
    lines: Iterable[str],
    *,
    source_file: str | None = None,
    first_lineno: int = 1,
    config: AnalyzeConfig | None = None,
) -> AnalysisResult:
    """Analyze an ordered sequence of lines.

    Args:
        lines: Raw lines in source order
        source_file: Optional source file path for error messages
        first_lineno: Line number of the first line
        config: Configuration (defaults to the active context config)

    Returns:
        AnalysisResult with lexemes and errors in input order.
    """
    config = config or get_analyze_config()
    numbered = list(enumerate(lines, start=first_lineno))

    if config.use_threads(len(numbered)):
        logger.debug(
            "analyzing %d lines on %d threads", len(numbered), config.max_workers
        )
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            results = list(
                pool.map(
                    lambda item: analyze_line(item[1], item[0], source_file=source_file),
                    numbered,
                )
            )
    else:
        results = [
            analyze_line(line, lineno, source_file=source_file) for lineno, line in numbered
        ]

    return AnalysisResult.from_lines(results)
