"""Tests for arithlex.serialization — result JSON round-trip."""

import json

import pytest

from arithlex import analyze
from arithlex.errors import ErrorKind
from arithlex.lexemes import Lexeme, LexemeKind
from arithlex.results import AnalysisResult, LineError
from arithlex.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    def test_lexeme(self) -> None:
        assert to_dict(Lexeme(LexemeKind.HEX_NUMBER, "0x1F", 2)) == {
            "_type": "Lexeme",
            "kind": "HEX_NUMBER",
            "value": "0x1F",
            "lineno": 2,
        }

    def test_line_error(self) -> None:
        err = LineError(3, "illegal character '#'", ErrorKind.ILLEGAL_CHARACTER)
        assert to_dict(err) == {
            "_type": "LineError",
            "lineno": 3,
            "message": "illegal character '#'",
            "kind": "ILLEGAL_CHARACTER",
            "source_file": None,
        }

    def test_result_nests_children(self) -> None:
        data = to_dict(analyze(["a", "(b"]))
        assert data["_type"] == "AnalysisResult"
        assert [lx["value"] for lx in data["lexemes"]] == ["a"]
        assert data["errors"][0]["kind"] == "UNBALANCED_PARENTHESES"


class TestRoundTrip:
    def test_result(self) -> None:
        result = analyze(["x := 5 + 0x1F;", "5 := x", "", "(a)"], source_file="calc.txt")
        assert from_json(to_json(result)) == result

    def test_empty_result(self) -> None:
        assert from_dict(to_dict(AnalysisResult())) == AnalysisResult()

    def test_tuples_restored(self) -> None:
        restored = from_dict(to_dict(analyze(["a + b"])))
        assert isinstance(restored, AnalysisResult)
        assert isinstance(restored.lexemes, tuple)
        assert restored.lexemes[1].kind is LexemeKind.OPERATOR


class TestJson:
    def test_sorted_keys(self) -> None:
        text = to_json(Lexeme(LexemeKind.IDENTIFIER, "x", 1))
        assert list(json.loads(text)) == ["_type", "kind", "lineno", "value"]

    def test_deterministic(self) -> None:
        result = analyze(["a := 1;", "(b"])
        assert to_json(result) == to_json(result)

    def test_indent(self) -> None:
        assert "\n" in to_json(AnalysisResult(), indent=2)


class TestErrors:
    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown result type"):
            from_dict({"_type": "Document"})

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError):
            from_dict({"lineno": 1})

    def test_unknown_enum_member(self) -> None:
        with pytest.raises(KeyError):
            from_dict({"_type": "Lexeme", "kind": "FLOAT", "value": "1.5", "lineno": 1})
