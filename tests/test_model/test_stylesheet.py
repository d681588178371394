"""Tests for the Stylesheet model."""

from pathlib import Path

import pytest

from css_structs import (
    Declaration,
    DeclarationList,
    FormatConfig,
    Rule,
    Stylesheet,
    parse_stylesheet,
)
from css_structs.parser import MissingCloseBrace, UnconsumedInput

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _load(name: str) -> Stylesheet:
    return Stylesheet.from_string((FIXTURES / name).read_text())


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------


class TestBasicFixture:
    @pytest.fixture()
    def sheet(self) -> Stylesheet:
        return _load("basic.css")

    def test_rule_count(self, sheet: Stylesheet) -> None:
        assert len(sheet.rules) == 4

    def test_selectors_in_order(self, sheet: Stylesheet) -> None:
        assert [r.selector for r in sheet.rules] == [
            "body",
            ".-c-red",
            "h1 , h2 > span",
            "a:hover",
        ]

    def test_declaration_count(self, sheet: Stylesheet) -> None:
        assert sheet.declaration_count == 7

    def test_important(self, sheet: Stylesheet) -> None:
        assert sheet.rules[1].declarations.get("color") == Declaration(
            "color", "#ff0000", important=True
        )

    def test_functional_values(self, sheet: Stylesheet) -> None:
        decls = sheet.rules[2].declarations
        assert decls.get("background").value == "linear-gradient(45deg, #007bff, #0056b3)"
        assert decls.get("--gap").value == "calc(1rem + (2px * 3))"
        assert decls.get("font-family").value == '"Helvetica Neue", Arial, sans-serif'


class TestRejectedFixtures:
    def test_media_query(self) -> None:
        with pytest.raises(UnconsumedInput) as exc_info:
            _load("media_query.css")
        assert exc_info.value.snippet.startswith("@media")
        assert exc_info.value.line == 3

    def test_nested_rule(self) -> None:
        with pytest.raises(UnconsumedInput, match="nested rules"):
            _load("nested.css")

    def test_unclosed_block(self) -> None:
        with pytest.raises(MissingCloseBrace):
            _load("unclosed.css")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestFromString:
    def test_empty(self) -> None:
        assert Stylesheet.from_string("").rules == []

    def test_whitespace_only(self) -> None:
        assert Stylesheet.from_string("   \n  ").rules == []

    def test_no_separator_between_rules(self) -> None:
        sheet = Stylesheet.from_string("a{b:c}d{e:f}")
        assert [r.selector for r in sheet.rules] == ["a", "d"]

    def test_same_selector_not_merged(self) -> None:
        sheet = Stylesheet.from_string("a { b: c } a { d: e }")
        assert len(sheet.rules) == 2
        assert len(sheet.find("a")) == 2

    def test_missing_close_brace(self) -> None:
        with pytest.raises(MissingCloseBrace):
            Stylesheet.from_string("body { color: red; margin: 10px")

    def test_at_rule_at_start(self) -> None:
        with pytest.raises(UnconsumedInput) as exc_info:
            Stylesheet.from_string("@media screen { body { color: red } }")
        assert exc_info.value.offset == 0

    def test_at_rule_after_rules(self) -> None:
        source = "body { color: red }\n@import url(x.css);"
        with pytest.raises(UnconsumedInput) as exc_info:
            Stylesheet.from_string(source)
        assert exc_info.value.offset == source.index("@")

    def test_comment(self) -> None:
        with pytest.raises(UnconsumedInput, match="comments"):
            Stylesheet.from_string("/* reset */ a { b: c }")

    def test_comment_inside_block(self) -> None:
        with pytest.raises(UnconsumedInput, match="comments"):
            Stylesheet.from_string("a { /* reset */ b: c }")

    def test_stray_close_brace(self) -> None:
        with pytest.raises(UnconsumedInput, match="unbalanced"):
            Stylesheet.from_string("a { b: c } }")

    def test_text_without_block(self) -> None:
        with pytest.raises(UnconsumedInput):
            Stylesheet.from_string("a { b: c } trailing")

    def test_escaped_space_in_selector(self) -> None:
        sheet = Stylesheet.from_string("a\\ { b: c }\nd { e: f }")
        assert [r.selector for r in sheet] == ["a\\ ", "d"]

    def test_parse_stylesheet_alias(self) -> None:
        assert parse_stylesheet("a { b: c }") == Stylesheet.from_string("a { b: c }")


# ---------------------------------------------------------------------------
# Construction and lookup
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_empty_constructor(self) -> None:
        assert Stylesheet().rules == []

    def test_push(self) -> None:
        sheet = Stylesheet()
        sheet.push(Rule("a", DeclarationList([Declaration("b", "c")])))
        assert sheet == Stylesheet.from_string("a { b: c; }")

    def test_find_normalizes_selector(self) -> None:
        sheet = Stylesheet.from_string("h1 , h2 { b: c } p { d: e }")
        assert sheet.find("h1  ,\n h2") == [sheet.rules[0]]
        assert sheet.find("div") == []

    def test_iteration(self) -> None:
        sheet = Stylesheet.from_string("a { b: c } d { e: f }")
        assert [r.selector for r in sheet] == ["a", "d"]
        assert len(sheet) == 2


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerialization:
    def test_default_layout(self) -> None:
        sheet = Stylesheet.from_string("a { b: c } d { e: f !important }")
        assert str(sheet) == "a {\n    b: c;\n}\n\nd {\n    e: f !important;\n}\n"

    def test_empty(self) -> None:
        assert str(Stylesheet()) == ""

    def test_compact(self) -> None:
        sheet = Stylesheet.from_string("a { b: c } d { e: f }")
        config = FormatConfig(compact=True, rule_separator="")
        assert sheet.to_css(config) == "a { b: c; }\nd { e: f; }\n"
