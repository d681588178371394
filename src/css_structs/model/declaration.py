"""Declaration model: one ``property: value [!important]`` pair."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from css_structs.parser.errors import ParseError
from css_structs.parser.primitives import Cursor, value_text


def _valid_property(name: str) -> bool:
    return all(ord(ch) > 127 or ch.isalnum() or ch in "_-" for ch in name)


@dataclass(frozen=True)
class Declaration:
    """A single CSS declaration such as ``color: red !important``.

    ``value`` is kept as opaque text; it is never broken down further.
    """

    property: str
    value: str
    important: bool = False

    def __post_init__(self) -> None:
        if not self.property:
            raise ValueError("Declaration property must be a non-empty string")
        if not _valid_property(self.property):
            raise ValueError(f"Invalid declaration property: {self.property!r}")
        try:
            value, end = value_text(Cursor(self.value))
        except ParseError as exc:
            raise ValueError(f"Invalid value for {self.property!r}: {exc.message}") from exc
        if not value:
            raise ValueError(f"Declaration {self.property!r} must have a non-empty value")
        if not end.at_end:
            raise ValueError(
                f"Invalid value for {self.property!r}: unexpected {end.describe_next()}"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def from_string(cls, source: str) -> Declaration:
        """Parse a single declaration; one trailing ``;`` is allowed."""
        from css_structs.parser.grammar import parse_declaration

        return parse_declaration(source)

    def replace(self, **changes: Any) -> Declaration:
        """Return a copy with whole fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_css(self) -> str:
        if self.important:
            return f"{self.property}: {self.value} !important"
        return f"{self.property}: {self.value}"

    def __str__(self) -> str:
        return self.to_css()
