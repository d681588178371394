"""CSS parsing: lexical primitives, grammar productions and error types."""

from css_structs.parser.errors import (
    EmptyIdentifier,
    EmptyValue,
    ExpectedToken,
    MissingCloseBrace,
    MissingColon,
    MissingOpenBrace,
    ParseError,
    UnconsumedInput,
)
from css_structs.parser.primitives import Cursor

__all__ = [
    "Cursor",
    "ParseError",
    "ExpectedToken",
    "EmptyIdentifier",
    "MissingColon",
    "EmptyValue",
    "MissingOpenBrace",
    "MissingCloseBrace",
    "UnconsumedInput",
]
