"""Grammar rules for declarations, declaration lists, rules and stylesheets.

The productions compose top-down::

    stylesheet       := (ws rule)* ws
    rule             := selector-text '{' declaration-list '}'
    declaration-list := (declaration ';')* declaration?
    declaration      := identifier ':' value-text ['!important']

Each production takes a :class:`Cursor` and returns ``(value, cursor)``.
The ``parse_*`` functions at the bottom run a production over a whole
string and reject anything left over.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from css_structs.model import Declaration, DeclarationList, Rule, Stylesheet
from css_structs.parser.errors import (
    EmptyValue,
    ExpectedToken,
    MissingCloseBrace,
    MissingColon,
    ParseError,
    UnconsumedInput,
)
from css_structs.parser.primitives import (
    Cursor,
    identifier,
    important_marker,
    literal,
    opens_block,
    selector_text,
    skip_whitespace,
    unsupported_construct,
    value_text,
)

__all__ = [
    "declaration",
    "declaration_list",
    "rule_head",
    "rule_body",
    "rule",
    "stylesheet",
    "parse_complete",
    "parse_declaration",
    "parse_declarations",
    "parse_rule",
    "parse_stylesheet",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
Production = Callable[[Cursor], tuple[T, Cursor]]


def _unsupported_reason(cursor: Cursor) -> str:
    """Explain why the statement at *cursor* cannot be parsed, if we know."""
    reason = unsupported_construct(cursor)
    if reason:
        return reason
    if cursor.startswith("}"):
        return "unbalanced '}'"
    if opens_block(cursor):
        return "nested rules are not supported"
    return ""


def _location(cursor: Cursor) -> str:
    line, column = cursor.line_column()
    return f"line {line}, column {column}"


def _single_rule_reason(cursor: Cursor) -> str:
    return unsupported_construct(cursor) or "expected a single rule"


def _skip_separators(cursor: Cursor) -> Cursor:
    cursor = skip_whitespace(cursor)
    while cursor.startswith(";"):
        cursor = skip_whitespace(cursor.advance(1))
    return cursor


# ---------------------------------------------------------------------------
# Productions
# ---------------------------------------------------------------------------


def declaration(cursor: Cursor) -> tuple[Declaration, Cursor]:
    start = skip_whitespace(cursor)
    name, after_name = identifier(start)
    colon = skip_whitespace(after_name)
    if not colon.startswith(":"):
        raise colon.error(MissingColon, name)
    after_colon = colon.advance(1)
    value, after_value = value_text(after_colon)
    if not value:
        raise skip_whitespace(after_colon).error(EmptyValue, name)
    important, end = important_marker(after_value)
    return Declaration(name, value, important), end


def declaration_list(cursor: Cursor) -> tuple[DeclarationList, Cursor]:
    """Parse declarations until ``}``, end of input or an unsupported statement.

    Stopping is not an error here; the caller decides what may follow.
    """
    declarations: list[Declaration] = []
    cursor = _skip_separators(cursor)
    while not cursor.at_end and not cursor.startswith("}"):
        if unsupported_construct(cursor) or opens_block(cursor):
            logger.debug("declaration list stopped at offset %d", cursor.offset)
            break
        index = len(declarations) + 1
        try:
            parsed, after = declaration(cursor)
            after = skip_whitespace(after)
            if not (
                after.at_end
                or after.startswith(";")
                or after.startswith("}")
                or unsupported_construct(after)
            ):
                raise after.error(ExpectedToken, ";", found=after.describe_next())
        except ParseError as exc:
            exc.annotate(f"in declaration {index} starting at {_location(cursor)}")
            raise
        declarations.append(parsed)
        cursor = _skip_separators(after)
    logger.debug("parsed %d declarations", len(declarations))
    return DeclarationList(declarations), cursor


def rule_head(cursor: Cursor) -> tuple[str, Cursor]:
    """Parse a selector and its opening brace."""
    start = skip_whitespace(cursor)
    reason = unsupported_construct(start)
    if reason:
        raise start.error(UnconsumedInput, reason)
    selector, brace = selector_text(start)
    _, body = literal(brace, "{")
    return selector, body


def rule_body(selector: str, cursor: Cursor) -> tuple[Rule, Cursor]:
    """Parse the declarations and closing brace of the rule for *selector*."""
    declarations, end = declaration_list(cursor)
    end = skip_whitespace(end)
    if end.at_end:
        raise end.error(MissingCloseBrace, selector)
    if not end.startswith("}"):
        raise end.error(UnconsumedInput, _unsupported_reason(end)).annotate(
            f"in rule {selector!r}"
        )
    return Rule(selector, declarations), end.advance(1)


def rule(cursor: Cursor) -> tuple[Rule, Cursor]:
    selector, body = rule_head(cursor)
    return rule_body(selector, body)


def stylesheet(cursor: Cursor) -> tuple[Stylesheet, Cursor]:
    """Parse rules until only whitespace remains.

    A rule whose head cannot be read ends the stylesheet, and the leftover
    text is reported as :class:`UnconsumedInput`. Once a rule's ``{`` has
    been read, any error inside it is reported as-is.
    """
    rules: list[Rule] = []
    cursor = skip_whitespace(cursor)
    while not cursor.at_end:
        try:
            selector, body = rule_head(cursor)
        except ParseError as exc:
            reason = _unsupported_reason(cursor) or getattr(exc, "reason", "") or exc.message
            raise cursor.error(UnconsumedInput, reason) from exc
        parsed, cursor = rule_body(selector, body)
        rules.append(parsed)
        cursor = skip_whitespace(cursor)
    logger.debug("parsed stylesheet with %d rules", len(rules))
    return Stylesheet(rules), cursor


# ---------------------------------------------------------------------------
# Whole-string entry points
# ---------------------------------------------------------------------------


def parse_complete(
    production: Production[T],
    source: str,
    *,
    trailing_semicolon: bool = False,
    explain: Callable[[Cursor], str] = _unsupported_reason,
) -> T:
    """Run *production* over all of *source*.

    Raises UnconsumedInput if anything but whitespace (and, when
    *trailing_semicolon* is set, a single ``;``) is left over. *explain*
    supplies the reason attached to that error.
    """
    value, cursor = production(Cursor(source))
    cursor = skip_whitespace(cursor)
    if trailing_semicolon and cursor.startswith(";"):
        cursor = skip_whitespace(cursor.advance(1))
    if not cursor.at_end:
        raise cursor.error(UnconsumedInput, explain(cursor))
    return value


def parse_declaration(source: str) -> Declaration:
    """Parse a single CSS declaration string into a Declaration."""
    return parse_complete(declaration, source, trailing_semicolon=True)


def parse_declarations(source: str) -> DeclarationList:
    """Parse the body of a rule (without braces) into a DeclarationList."""
    return parse_complete(declaration_list, source)


def parse_rule(source: str) -> Rule:
    """Parse a single ``selector { ... }`` rule."""
    return parse_complete(rule, source, explain=_single_rule_reason)


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet.

    Returns a Stylesheet containing all parsed rules in source order.
    """
    return parse_complete(stylesheet, source)
