"""Parser error types.

Every failure raised while parsing CSS text is a :class:`ParseError`
subclass carrying the character offset where parsing stopped, the derived
1-based line/column, and a short snippet of the input at that point.
"""

from __future__ import annotations

from typing import Any

SNIPPET_LENGTH = 30


def line_column(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based line and column of *offset* in *source*."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


class ParseError(Exception):
    """Raised when CSS source cannot be parsed."""

    kind = "parse_error"

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        offset: int = 0,
    ) -> None:
        self.message = message
        self.source = source
        self.offset = offset
        self.line, self.column = line_column(source, offset)
        self.snippet = source[offset : offset + SNIPPET_LENGTH]
        self.context: list[str] = []
        super().__init__(message)

    def annotate(self, note: str) -> ParseError:
        """Attach positional context from an enclosing grammar layer."""
        self.context.append(note)
        return self

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"

    def describe(self) -> str:
        """Render a multi-line diagnostic with the offending source line."""
        lines = [f"{self.kind}: {self}"]
        for note in self.context:
            lines.append(f"  {note}")
        if self.source:
            source_line = self.source.split("\n")[self.line - 1]
            lines.append(f"  | {source_line}")
            lines.append("  | " + " " * (self.column - 1) + "^")
        return "\n".join(lines)


class ExpectedToken(ParseError):
    """An expected punctuation token or keyword was not found."""

    kind = "expected_token"

    def __init__(self, token: str, **kwargs: Any) -> None:
        self.token = token
        found = kwargs.pop("found", None)
        message = f"Expected {token!r}"
        if found:
            message += f", found {found}"
        super().__init__(message, **kwargs)


class EmptyIdentifier(ParseError):
    """A property name or selector was empty where one is required."""

    kind = "empty_identifier"

    def __init__(self, what: str = "identifier", **kwargs: Any) -> None:
        self.what = what
        super().__init__(f"Expected {what}", **kwargs)


class MissingColon(ParseError):
    """A declaration's property name is not followed by ':'."""

    kind = "missing_colon"

    def __init__(self, property: str, **kwargs: Any) -> None:
        self.property = property
        super().__init__(f"Missing ':' after property {property!r}", **kwargs)


class EmptyValue(ParseError):
    """A declaration has nothing between its ':' and its terminator."""

    kind = "empty_value"

    def __init__(self, property: str, **kwargs: Any) -> None:
        self.property = property
        super().__init__(f"Empty value for property {property!r}", **kwargs)


class MissingOpenBrace(ParseError):
    """A rule's selector is not followed by '{'."""

    kind = "missing_open_brace"

    def __init__(self, **kwargs: Any) -> None:
        found = kwargs.pop("found", None)
        message = "Missing '{' after selector"
        if found:
            message += f", found {found}"
        super().__init__(message, **kwargs)


class MissingCloseBrace(ParseError):
    """A rule block reaches the end of input without '}'."""

    kind = "missing_close_brace"

    def __init__(self, selector: str = "", **kwargs: Any) -> None:
        self.selector = selector
        message = "Missing '}' to close rule"
        if selector:
            message += f" {selector!r}"
        super().__init__(message, **kwargs)


class UnconsumedInput(ParseError):
    """Content remains that no supported production accepts.

    Comments, at-rules and nested rules all end up here.
    """

    kind = "unconsumed_input"

    def __init__(self, reason: str = "", **kwargs: Any) -> None:
        self.reason = reason
        offset = kwargs.get("offset", 0)
        remainder = kwargs.get("source", "")[offset : offset + SNIPPET_LENGTH]
        message = f"Unexpected input {remainder!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, **kwargs)
