"""css_structs -- parse a subset of CSS into plain data structures and back.

Quick start::

    from css_structs import Stylesheet

    sheet = Stylesheet.from_string("body { margin: 0; padding: 0 }")
    print(sheet)
"""

__version__ = "0.1.0"

from css_structs.config import FormatConfig
from css_structs.model import Declaration, DeclarationList, Rule, Stylesheet
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
from css_structs.parser.grammar import (
    parse_declaration,
    parse_declarations,
    parse_rule,
    parse_stylesheet,
)

__all__ = [
    "__version__",
    # model
    "Declaration",
    "DeclarationList",
    "Rule",
    "Stylesheet",
    # config
    "FormatConfig",
    # parsing
    "parse_declaration",
    "parse_declarations",
    "parse_rule",
    "parse_stylesheet",
    # errors
    "ParseError",
    "ExpectedToken",
    "EmptyIdentifier",
    "MissingColon",
    "EmptyValue",
    "MissingOpenBrace",
    "MissingCloseBrace",
    "UnconsumedInput",
]
