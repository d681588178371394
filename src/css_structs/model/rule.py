"""Rule model: a selector paired with its declaration block."""

from __future__ import annotations

from dataclasses import dataclass, field

from css_structs.config import DEFAULT_FORMAT, FormatConfig
from css_structs.model.declaration_list import DeclarationList
from css_structs.parser.errors import ParseError
from css_structs.parser.primitives import (
    Cursor,
    selector_text,
    skip_whitespace,
    unsupported_construct,
)


@dataclass
class Rule:
    """A CSS rule such as ``h1, h2 { margin: 0 }``.

    The selector is stored as text with surrounding whitespace trimmed and
    inner whitespace runs collapsed to a single space; it is not parsed any
    further.
    """

    selector: str
    declarations: DeclarationList = field(default_factory=DeclarationList)

    def __post_init__(self) -> None:
        unsupported = unsupported_construct(skip_whitespace(Cursor(self.selector)))
        if unsupported:
            raise ValueError(f"Invalid selector {self.selector!r}: {unsupported}")
        try:
            selector, brace = selector_text(Cursor(self.selector + "{"))
        except ParseError as exc:
            raise ValueError(f"Invalid selector {self.selector!r}: {exc.message}") from exc
        if brace.offset != len(self.selector):
            raise ValueError(f"Invalid selector {self.selector!r}: unexpected '{{'")
        self.selector = selector

    @classmethod
    def from_string(cls, source: str) -> Rule:
        from css_structs.parser.grammar import parse_rule

        return parse_rule(source)

    def to_css(self, config: FormatConfig = DEFAULT_FORMAT) -> str:
        if config.compact:
            if not self.declarations:
                return f"{self.selector} {{}}\n"
            return f"{self.selector} {{ {self.declarations.to_css()} }}\n"
        lines = [f"{self.selector} {{"]
        lines.extend(f"{config.indent}{d.to_css()};" for d in self.declarations)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_css()
