"""Lexical primitives shared by every grammar layer.

Each primitive takes an immutable :class:`Cursor` and returns the parsed
value together with a new cursor positioned after it. A primitive that fails
raises and leaves the caller's cursor untouched, so callers can try another
production by simply reusing the cursor they already hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from css_structs.parser.errors import (
    EmptyIdentifier,
    ExpectedToken,
    MissingOpenBrace,
    ParseError,
    UnconsumedInput,
    line_column,
)

__all__ = [
    "WHITESPACE",
    "Cursor",
    "skip_whitespace",
    "identifier",
    "literal",
    "important_marker",
    "value_text",
    "selector_text",
    "normalize_selector",
    "opens_block",
    "unsupported_construct",
]

WHITESPACE = " \t\n\r\f"

IMPORTANT = "important"


@dataclass(frozen=True)
class Cursor:
    """A position inside a piece of CSS source text."""

    text: str
    offset: int = 0

    @property
    def rest(self) -> str:
        return self.text[self.offset :]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self, count: int = 1) -> str:
        return self.text[self.offset : self.offset + count]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def advance(self, count: int) -> Cursor:
        return self.moved_to(self.offset + count)

    def moved_to(self, offset: int) -> Cursor:
        offset = min(offset, len(self.text))
        if offset == self.offset:
            return self
        return Cursor(self.text, offset)

    def line_column(self) -> tuple[int, int]:
        return line_column(self.text, self.offset)

    def describe_next(self) -> str:
        """Human-readable description of the character at the cursor."""
        if self.at_end:
            return "end of input"
        return repr(self.peek())

    def error(self, error_cls: type[ParseError], *args: Any, **kwargs: Any) -> ParseError:
        """Build an error of *error_cls* located at this cursor."""
        return error_cls(*args, source=self.text, offset=self.offset, **kwargs)


def _is_ident_char(ch: str) -> bool:
    if ord(ch) > 127:
        return True
    return ch.isalnum() or ch in "_-"


def _string_end(text: str, index: int) -> int | None:
    """Return the index just past the quoted string starting at *index*.

    Returns ``None`` if the string is never closed.
    """
    quote = text[index]
    index += 1
    while index < len(text):
        ch = text[index]
        if ch == "\\":
            index += 2
            continue
        if ch == quote:
            return index + 1
        index += 1
    return None


def _skip_string(cursor: Cursor, index: int) -> int:
    end = _string_end(cursor.text, index)
    if end is None:
        quote = cursor.text[index]
        raise cursor.moved_to(len(cursor.text)).error(ExpectedToken, quote, found="end of input")
    return end


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Consume zero or more whitespace characters. Never fails."""
    text = cursor.text
    index = cursor.offset
    while index < len(text) and text[index] in WHITESPACE:
        index += 1
    return cursor.moved_to(index)


def identifier(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume a property-style identifier such as ``color``, ``-webkit-x`` or ``--gap``."""
    text = cursor.text
    index = cursor.offset
    while index < len(text) and _is_ident_char(text[index]):
        index += 1
    if index == cursor.offset:
        raise cursor.error(EmptyIdentifier, "property name")
    return text[cursor.offset : index], cursor.moved_to(index)


def literal(cursor: Cursor, token: str) -> tuple[str, Cursor]:
    """Match *token* exactly, consuming the whitespace around it."""
    start = skip_whitespace(cursor)
    if not start.startswith(token):
        raise start.error(ExpectedToken, token, found=start.describe_next())
    return token, skip_whitespace(start.advance(len(token)))


def important_marker(cursor: Cursor) -> tuple[bool, Cursor]:
    """Match an optional ``!important`` marker.

    Whitespace is allowed before the ``!`` and between ``!`` and the
    keyword, which is matched case-insensitively. Returns ``False`` and the
    original cursor when there is no ``!`` at all.
    """
    bang = skip_whitespace(cursor)
    if not bang.startswith("!"):
        return False, cursor
    keyword = skip_whitespace(bang.advance(1))
    end = keyword.advance(len(IMPORTANT))
    if keyword.peek(len(IMPORTANT)).lower() != IMPORTANT or (
        not end.at_end and _is_ident_char(end.peek())
    ):
        raise bang.error(ExpectedToken, "!important", found=repr(bang.peek(12)))
    return True, end


def value_text(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume a declaration value and return it trimmed.

    The value ends at a ``;`` or ``!`` outside parentheses, at any ``{``,
    ``}`` or comment opener, or at the end of input. Quoted strings and backslash escapes are
    skipped over whole, so ``url("a;b")`` stays in one piece. Escaped
    whitespace is part of the value and survives trimming.
    """
    text = cursor.text
    index = cursor.offset
    kept = index
    depth = 0
    while index < len(text):
        ch = text[index]
        if ch == "\\":
            if index + 1 == len(text):
                raise cursor.moved_to(index).error(
                    ExpectedToken, "escaped character", found="end of input"
                )
            index += 2
            kept = index
            continue
        if ch in "\"'":
            index = _skip_string(cursor, index)
            kept = index
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth:
                depth -= 1
        elif ch in "{}" or text.startswith("/*", index):
            break
        elif depth == 0 and ch in ";!":
            break
        if ch not in WHITESPACE:
            kept = index + 1
        index += 1
    end = cursor.moved_to(index)
    if depth:
        raise end.error(ExpectedToken, ")", found=end.describe_next())
    start = skip_whitespace(cursor).offset
    return text[start:kept], end


def normalize_selector(text: str) -> str:
    """Trim *text* and collapse whitespace runs outside quoted strings to one space.

    Escaped characters, escaped whitespace included, are kept as written.
    """
    out: list[str] = []
    quote = ""
    escaped = False
    space = False
    for ch in text:
        if escaped:
            out.append(ch)
            escaped = False
            continue
        if ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in WHITESPACE:
            space = bool(out)
            continue
        elif ch in "\"'":
            quote = ch
        if space:
            out.append(" ")
            space = False
        out.append(ch)
    return "".join(out)


def selector_text(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume a selector up to, but not including, its ``{``.

    The selector internals are not parsed; braces inside quoted strings or
    attribute brackets do not end it.
    """
    text = cursor.text
    index = cursor.offset
    brackets = 0
    while index < len(text):
        ch = text[index]
        if ch == "\\":
            index += 2
            continue
        if ch in "\"'":
            index = _skip_string(cursor, index)
            continue
        if ch == "[":
            brackets += 1
        elif ch == "]":
            if brackets:
                brackets -= 1
        elif text.startswith("/*", index):
            raise cursor.moved_to(index).error(UnconsumedInput, "comments are not supported")
        elif brackets == 0 and ch == "{":
            break
        elif brackets == 0 and ch in "};":
            raise cursor.moved_to(index).error(MissingOpenBrace, found=repr(ch))
        index += 1
    end = cursor.moved_to(index)
    if end.at_end:
        raise end.error(MissingOpenBrace, found="end of input")
    selector = normalize_selector(text[cursor.offset : end.offset])
    if not selector:
        raise skip_whitespace(cursor).error(EmptyIdentifier, "selector")
    return selector, end


def opens_block(cursor: Cursor) -> bool:
    """Whether the statement at *cursor* reaches a ``{`` before it ends.

    Used to spot nested rules inside a declaration block without consuming
    anything. A statement ends at a top-level ``;``, at ``}`` or at the end
    of input.
    """
    text = cursor.text
    index = cursor.offset
    depth = 0
    while index < len(text):
        ch = text[index]
        if ch == "\\":
            index += 2
            continue
        if ch in "\"'":
            end = _string_end(text, index)
            if end is None:
                return False
            index = end
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth:
                depth -= 1
        elif ch == "{":
            return True
        elif ch == "}" or (ch == ";" and depth == 0) or text.startswith("/*", index):
            return False
        index += 1
    return False


def unsupported_construct(cursor: Cursor) -> str:
    """Name the unsupported construct starting at *cursor*, or return ``""``."""
    if cursor.startswith("@"):
        return "at-rules are not supported"
    if cursor.startswith("/*"):
        return "comments are not supported"
    return ""
