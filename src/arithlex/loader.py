"""Read expression lines from a text file.

The core never touches files; this is the collaborator that feeds it.
An empty file is an error here, whereas analyze([]) simply returns an
empty result.
"""

from __future__ import annotations

import re
from pathlib import Path

from arithlex.errors import ArithlexError, EmptySourceError
from arithlex.utils.logger import get_logger

logger = get_logger(__name__)

# Only CR, LF and CRLF end a line; form feed, vertical tab, NEL and the
# Unicode separators stay inside the line (str.splitlines() breaks on them)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text into lines on CR, LF and CRLF only.

    A trailing line terminator does not start an extra empty line.

    Example:
        >>> split_lines("a\\x0cb\\r\\nc\\n")
        ['a\\x0cb', 'c']
    """
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_lines(path: str | Path, *, encoding: str = "utf-8-sig") -> list[str]:
    """Read all lines of a text file, without line terminators.

    Args:
        path: File to read
        encoding: Text encoding; the default tolerates a UTF-8 BOM

    Returns:
        Lines in file order.

    Raises:
        EmptySourceError: If the file has no lines.
        ArithlexError: If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        with path.open(encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ArithlexError(f"Cannot read {path}: {exc}") from exc

    lines = split_lines(text)
    if not lines:
        raise EmptySourceError(str(path))

    logger.debug("read %d lines from %s", len(lines), path)
    return lines
