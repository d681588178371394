from __future__ import annotations

from dataclasses import dataclass

from css_structs.parser.primitives import WHITESPACE


@dataclass(frozen=True)
class FormatConfig:
    """Controls how rules and stylesheets are written back out as CSS."""

    indent: str = "    "
    rule_separator: str = "\n"  # between rules; each rule already ends with a newline
    compact: bool = False  # one line per rule: "a { b: c; }"

    def __post_init__(self) -> None:
        if any(ch not in WHITESPACE for ch in self.indent):
            raise ValueError("FormatConfig.indent must contain only whitespace")
        if any(ch not in WHITESPACE for ch in self.rule_separator):
            raise ValueError("FormatConfig.rule_separator must contain only whitespace")


DEFAULT_FORMAT = FormatConfig()
