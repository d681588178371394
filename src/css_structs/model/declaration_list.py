"""DeclarationList model: the ordered body of a rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from css_structs.model.declaration import Declaration


@dataclass
class DeclarationList:
    """An ordered sequence of declarations.

    Source order is preserved. Repeated properties are all kept; by CSS
    convention the last one wins, which is what :meth:`get` returns.
    """

    declarations: list[Declaration] = field(default_factory=list)

    @classmethod
    def from_string(cls, source: str) -> DeclarationList:
        from css_structs.parser.grammar import parse_declarations

        return parse_declarations(source)

    # --- mutation -------------------------------------------------------------

    def push(self, declaration: Declaration) -> None:
        """Append *declaration* at the end of the list."""
        self.declarations.append(declaration)

    def remove_declaration(self, property: str) -> bool:
        """Remove every declaration for *property* (case-sensitive).

        Returns True if anything was removed.
        """
        kept = [d for d in self.declarations if d.property != property]
        removed = len(kept) != len(self.declarations)
        self.declarations[:] = kept
        return removed

    # --- lookup ---------------------------------------------------------------

    def get(self, property: str) -> Declaration | None:
        """Return the effective (last) declaration for *property*, if any."""
        for declaration in reversed(self.declarations):
            if declaration.property == property:
                return declaration
        return None

    def get_all(self, property: str) -> list[Declaration]:
        return [d for d in self.declarations if d.property == property]

    @property
    def properties(self) -> list[str]:
        """Property names in source order, without duplicates."""
        return list(dict.fromkeys(d.property for d in self.declarations))

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __contains__(self, property: object) -> bool:
        return any(d.property == property for d in self.declarations)

    # --- serialization ----------------------------------------------------------

    def to_css(self) -> str:
        if not self.declarations:
            return ""
        return "; ".join(d.to_css() for d in self.declarations) + ";"

    def __str__(self) -> str:
        return self.to_css()
