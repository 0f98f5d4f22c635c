"""Line and token validators.

Both raise arithlex.errors.ValidationError on the first failing check.
"""

from arithlex.validation.line import validate_line
from arithlex.validation.tokens import validate_tokens

__all__ = ["validate_line", "validate_tokens"]
