"""Tests for whole-line validation and its check order."""

import pytest

from arithlex.errors import ErrorKind, ValidationError
from arithlex.validation import validate_line


def _kind(line: str) -> ErrorKind:
    with pytest.raises(ValidationError) as info:
        validate_line(line)
    return info.value.kind


class TestValidLines:
    @pytest.mark.parametrize(
        "line",
        [
            "x := 5 + 0x1F;",
            "a",
            "42;",
            "(a + b) * c;",
            "x:=1",
            "a b := 3",
            "result := ((a - 1) / (b + 0xff));",
        ],
    )
    def test_passes(self, line: str) -> None:
        validate_line(line)


class TestEachCheck:
    """Every check raises its own ErrorKind."""

    @pytest.mark.parametrize("line", ["(a + b", "a + b)", "((x)"])
    def test_unbalanced_parentheses(self, line: str) -> None:
        assert _kind(line) is ErrorKind.UNBALANCED_PARENTHESES

    @pytest.mark.parametrize("line", ["a # b", "x := 1.5", "é := 1", "a, b", "x := 'a'"])
    def test_illegal_character(self, line: str) -> None:
        assert _kind(line) is ErrorKind.ILLEGAL_CHARACTER

    def test_illegal_character_named_in_message(self) -> None:
        with pytest.raises(ValidationError, match="'#'"):
            validate_line("a # b")

    def test_multiple_assignments(self) -> None:
        assert _kind("a := b := c") is ErrorKind.MULTIPLE_ASSIGNMENTS

    @pytest.mark.parametrize("line", ["5 := x", ":= 5", "(x := 5)", "1ab := 2"])
    def test_missing_assignment_target(self, line: str) -> None:
        assert _kind(line) is ErrorKind.MISSING_ASSIGNMENT_TARGET

    @pytest.mark.parametrize("line", ["a := 0xZZ;", "a := 0x", "a := 0x;", "0xg + 1"])
    def test_malformed_hex(self, line: str) -> None:
        assert _kind(line) is ErrorKind.MALFORMED_HEX

    def test_0x_inside_identifier_is_checked_too(self) -> None:
        assert _kind("a0xg := 1") is ErrorKind.MALFORMED_HEX

    @pytest.mark.parametrize("line", ["a + ;", "a +", "x := b * ;", "a / ;", "b -   ;"])
    def test_missing_operand(self, line: str) -> None:
        assert _kind(line) is ErrorKind.MISSING_OPERAND

    def test_trailing_operator_reported_as_missing_operand(self) -> None:
        # The operand check runs first and already covers end of line
        assert _kind("a -") is ErrorKind.MISSING_OPERAND


class TestCheckOrder:
    """The first failing check decides the reported kind."""

    def test_parentheses_before_illegal_character(self) -> None:
        assert _kind("(a + #") is ErrorKind.UNBALANCED_PARENTHESES

    def test_illegal_character_before_multiple_assignments(self) -> None:
        assert _kind("a # := b := c") is ErrorKind.ILLEGAL_CHARACTER

    def test_multiple_assignments_before_target(self) -> None:
        assert _kind("5 := 6 := 7") is ErrorKind.MULTIPLE_ASSIGNMENTS

    def test_target_before_malformed_hex(self) -> None:
        assert _kind("5 := 0xZZ") is ErrorKind.MISSING_ASSIGNMENT_TARGET

    def test_malformed_hex_before_missing_operand(self) -> None:
        assert _kind("0xZZ +") is ErrorKind.MALFORMED_HEX


class TestErrorDetails:
    def test_lineno_attached(self) -> None:
        with pytest.raises(ValidationError) as info:
            validate_line("(", lineno=7)
        assert info.value.lineno == 7
        assert str(info.value) == "7 parenthesis count mismatch"

    def test_default_message(self) -> None:
        with pytest.raises(ValidationError) as info:
            validate_line("a + ;")
        assert info.value.message == "missing operand after operator"
