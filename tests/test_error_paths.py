"""Error construction and formatting tests."""

import pytest

from arithlex.errors import ArithlexError, EmptySourceError, ErrorKind, ValidationError
from arithlex.results import LineError

# =========================================================================
# ValidationError construction and formatting
# =========================================================================


class TestValidationErrorFormatting:
    def test_default_message(self) -> None:
        err = ValidationError(ErrorKind.MALFORMED_HEX)
        assert str(err) == "malformed hexadecimal literal"
        assert err.lineno is None
        assert err.source_file is None

    def test_custom_message(self) -> None:
        err = ValidationError(ErrorKind.ILLEGAL_CHARACTER, "illegal character '$'")
        assert err.message == "illegal character '$'"

    def test_with_line_number(self) -> None:
        err = ValidationError(ErrorKind.MISSING_OPERAND, lineno=42)
        assert str(err) == "42 missing operand after operator"

    def test_with_source_file(self) -> None:
        err = ValidationError(ErrorKind.MISSING_OPERAND, lineno=1, source_file="calc.txt")
        assert str(err) == "calc.txt:1 missing operand after operator"

    def test_is_arithlex_error(self) -> None:
        assert isinstance(ValidationError(ErrorKind.UNKNOWN_SYMBOL), ArithlexError)


# =========================================================================
# ErrorKind
# =========================================================================


class TestErrorKind:
    def test_shared_description_does_not_alias(self) -> None:
        assert ErrorKind.INVALID_ASSIGNMENT_CONTEXT is not ErrorKind.MISSING_ASSIGNMENT_TARGET
        assert (
            ErrorKind.INVALID_ASSIGNMENT_CONTEXT.description
            == ErrorKind.MISSING_ASSIGNMENT_TARGET.description
        )

    def test_every_kind_described(self) -> None:
        for kind in ErrorKind:
            assert kind.description

    def test_ten_kinds(self) -> None:
        assert len(ErrorKind) == 10


# =========================================================================
# LineError
# =========================================================================


class TestLineError:
    def test_str_without_file(self) -> None:
        err = LineError(3, "invalid operator", ErrorKind.INVALID_OPERATOR)
        assert str(err) == "line 3: invalid operator"

    def test_from_exception(self) -> None:
        exc = ValidationError(ErrorKind.UNKNOWN_SYMBOL, "unknown symbol: $", lineno=9)
        err = LineError.from_exception(exc, 9, "calc.txt")
        assert err == LineError(9, "unknown symbol: $", ErrorKind.UNKNOWN_SYMBOL, "calc.txt")

    def test_from_exception_keeps_exception_file(self) -> None:
        exc = ValidationError(ErrorKind.MALFORMED_HEX, source_file="a.txt")
        assert LineError.from_exception(exc, 1).source_file == "a.txt"

    def test_frozen(self) -> None:
        err = LineError(1, "x", ErrorKind.ILLEGAL_CHARACTER)
        with pytest.raises(AttributeError):
            err.lineno = 2  # type: ignore[misc]


class TestEmptySourceError:
    def test_message(self) -> None:
        err = EmptySourceError("calc.txt")
        assert str(err) == "File is empty: calc.txt"
        assert isinstance(err, ArithlexError)
