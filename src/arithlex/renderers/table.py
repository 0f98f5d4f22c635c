"""Plain-text table renderer.

Lays lexemes out in three columns (Lexeme Type, Value, Line Number),
padded to the widest cell in each column.

Example:
    >>> from arithlex import analyze
    >>> print(render_table(analyze(["x := 1;"])))
    Lexeme Type    | Value | Line Number
    ---------------+-------+------------
    Identifier     | x     | 1
    Assignment     | :=    | 1
    Integer Number | 1     | 1
    Statement End  | ;     | 1
"""

from __future__ import annotations

from arithlex.results import AnalysisResult, LineError

HEADERS = ("Lexeme Type", "Value", "Line Number")


class TableRenderer:
    """Render an AnalysisResult's lexemes as a fixed-width text table."""

    __slots__ = ()

    def render(self, result: AnalysisResult) -> str:
        """Render lexemes to a table; errors are not included."""
        rows = [tuple(str(cell) for cell in lx.as_row()) for lx in result.lexemes]
        widths = [len(h) for h in HEADERS]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))

        lines = [self._format_row(HEADERS, widths)]
        lines.append("-+-".join("-" * w for w in widths))
        lines.extend(self._format_row(row, widths) for row in rows)
        return "\n".join(lines) + "\n"

    def _format_row(self, row: tuple[str, ...], widths: list[int]) -> str:
        return " | ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip()


def render_table(result: AnalysisResult) -> str:
    """Render lexemes with the default TableRenderer."""
    return TableRenderer().render(result)


def format_error(error: LineError) -> str:
    """One-line user notification for a rejected line."""
    return f"Error in line {error.lineno}: {error.message}"
