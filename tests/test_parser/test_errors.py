"""Tests for parse error types and diagnostics."""

import pytest

from css_structs import Stylesheet
from css_structs.parser import (
    EmptyIdentifier,
    EmptyValue,
    ExpectedToken,
    MissingCloseBrace,
    MissingColon,
    MissingOpenBrace,
    ParseError,
    UnconsumedInput,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_cls",
        [
            ExpectedToken,
            EmptyIdentifier,
            MissingColon,
            EmptyValue,
            MissingOpenBrace,
            MissingCloseBrace,
            UnconsumedInput,
        ],
    )
    def test_all_errors_are_parse_errors(self, error_cls: type) -> None:
        assert issubclass(error_cls, ParseError)

    def test_kinds_are_distinct(self) -> None:
        kinds = {
            cls.kind
            for cls in (
                ExpectedToken,
                EmptyIdentifier,
                MissingColon,
                EmptyValue,
                MissingOpenBrace,
                MissingCloseBrace,
                UnconsumedInput,
            )
        }
        assert len(kinds) == 7


class TestPosition:
    def test_line_and_column(self) -> None:
        source = "a {\n  color red;\n}"
        err = MissingColon("color", source=source, offset=12)
        assert err.line == 2
        assert err.column == 9
        assert err.snippet == "red;\n}"

    def test_str_includes_location(self) -> None:
        err = ExpectedToken(";", source="a b", offset=2, found="'b'")
        assert str(err) == "Expected ';', found 'b' (line 1, column 3)"

    def test_defaults_without_source(self) -> None:
        err = ParseError("boom")
        assert err.offset == 0
        assert err.line == 1
        assert err.column == 1
        assert err.snippet == ""


class TestUnconsumedInput:
    def test_message_carries_remainder_and_reason(self) -> None:
        err = UnconsumedInput("at-rules are not supported", source="a {}\n@media x {}", offset=5)
        assert err.message == "Unexpected input '@media x {}' (at-rules are not supported)"
        assert err.reason == "at-rules are not supported"


class TestDescribe:
    def test_points_at_offending_column(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Stylesheet.from_string("a { b: c }\nd { e f }")
        text = exc_info.value.describe()
        lines = text.splitlines()
        assert lines[0].startswith("missing_colon: Missing ':' after property 'e'")
        assert lines[1] == "  in declaration 1 starting at line 2, column 5"
        assert lines[2] == "  | d { e f }"
        assert lines[3] == "  | " + " " * 6 + "^"

    def test_annotate_returns_same_error(self) -> None:
        err = EmptyValue("color", source="color:", offset=6)
        assert err.annotate("in rule 'a'") is err
        assert err.context == ["in rule 'a'"]
