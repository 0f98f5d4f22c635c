"""Command-line entry point.

Usage:
    arithlex FILE [--format table|json] [--workers N] [--verbose]
    python -m arithlex FILE

Prints the lexeme table (or JSON) to stdout and one "Error in line N"
notification per rejected line to stderr.

Exit codes: 0 all lines valid, 1 some line rejected, 2 file not loaded.
"""

from __future__ import annotations

import argparse
import logging
import sys

from arithlex import Analyzer, __version__
from arithlex.config import AnalyzeConfig
from arithlex.errors import ArithlexError
from arithlex.renderers.table import format_error, render_table
from arithlex.serialization import to_json

EXIT_OK = 0
EXIT_LINE_ERRORS = 1
EXIT_LOAD_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="arithlex",
        description="Classify arithmetic/assignment expressions into lexemes.",
    )
    ap.add_argument("file", help="text file with one expression per line")
    ap.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="output format (default: table)",
    )
    ap.add_argument(
        "--workers",
        type=int,
        default=1,
        help="threads used to analyze lines (default: 1)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        analyzer = Analyzer(AnalyzeConfig(max_workers=max(1, args.workers)))
        result = analyzer.analyze_file(args.file)
    except ArithlexError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    if args.format == "json":
        print(to_json(result, indent=2))
    else:
        sys.stdout.write(render_table(result))

    for err in result.errors:
        print(format_error(err), file=sys.stderr)

    return EXIT_OK if result.ok else EXIT_LINE_ERRORS


if __name__ == "__main__":
    sys.exit(main())
