"""Opt-in profiling for analysis runs.

Zero overhead when disabled (get_analysis_accumulator() returns None).

Example:
    from arithlex import analyze
    from arithlex.profiling import profiled_analyze

    with profiled_analyze() as metrics:
        analyze(["x := 1;", "(a + b"])

    print(metrics.summary())
    # {"total_ms": 0.1, "analyze_calls": 1, "line_count": 2, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class AnalysisAccumulator:
    """Accumulated metrics across analyze() calls.

    Attributes:
        start_time: Profiling start timestamp.
        analyze_calls: Number of analyze() calls recorded.
        line_count: Input lines seen, blank lines included.
        lexeme_count: Lexemes produced.
        error_count: Lines rejected.

    """

    start_time: float = field(default_factory=perf_counter)
    analyze_calls: int = 0
    line_count: int = 0
    lexeme_count: int = 0
    error_count: int = 0

    def record_analysis(self, line_count: int, lexeme_count: int, error_count: int) -> None:
        """Record one analyze() call."""
        self.analyze_calls += 1
        self.line_count += line_count
        self.lexeme_count += lexeme_count
        self.error_count += error_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of analysis metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "analyze_calls": self.analyze_calls,
            "line_count": self.line_count,
            "lexeme_count": self.lexeme_count,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[AnalysisAccumulator | None] = ContextVar(
    "analysis_accumulator",
    default=None,
)


def get_analysis_accumulator() -> AnalysisAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_analyze() -> Iterator[AnalysisAccumulator]:
    """Context manager for profiled analysis.

    Yields:
        AnalysisAccumulator populated by analyze() calls inside the block.

    """
    acc = AnalysisAccumulator()
    token: Token[AnalysisAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
